"""
Error types and diagnostic messages.

Every validation failure in chromascale raises one of three exceptions, all
subclasses of :class:`ValueError`:

- :class:`NullOrMissingInputError`: a required sequence is ``None`` or empty
- :class:`InvalidLengthError`: a sequence has the wrong number of items
- :class:`OutOfRangeError`: a position, channel or count is outside its domain

The human-readable text attached to an error is looked up from an
:class:`ErrorCode` through the active message provider. The default provider
returns built-in English messages; applications may install their own
(e.g. a localized string table) with :func:`set_message_provider`.

>>> from chromascale.errors import set_message_provider, ErrorCode
>>> set_message_provider({ErrorCode.VALUE_NOT_PERCENTAGE: "Doit être entre 0 et 1"}.__getitem__)
"""
from __future__ import annotations
from enum import Enum
from typing import Callable, Optional


class ErrorCode(str, Enum):
    NULL_OR_EMPTY = "NullOrEmpty"
    WRONG_COLOR_DATA_ARRAY_SIZE = "WrongColorDataArraySize"
    WRONG_CHANNEL_COUNT = "WrongChannelCount"
    VALUE_NOT_PERCENTAGE = "ValueNotPercentage"
    VALUE_NOT_STRICTLY_POSITIVE = "ValueNotStrictlyPositive"
    VALUE_NOT_POSITIVE = "ValueNotPositive"
    CHANNEL_OUT_OF_RANGE = "ChannelOutOfRange"


DEFAULT_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NULL_OR_EMPTY: "Value cannot be None or empty.",
    ErrorCode.WRONG_COLOR_DATA_ARRAY_SIZE: "Color data does not have the expected number of elements.",
    ErrorCode.WRONG_CHANNEL_COUNT: "Color value does not have the expected number of channels.",
    ErrorCode.VALUE_NOT_PERCENTAGE: "Value must be in the [0, 1] range.",
    ErrorCode.VALUE_NOT_STRICTLY_POSITIVE: "Value must be strictly greater than 1.",
    ErrorCode.VALUE_NOT_POSITIVE: "Value must be at least 1.",
    ErrorCode.CHANNEL_OUT_OF_RANGE: "Color channel is outside of its valid range.",
}

MessageProvider = Callable[[ErrorCode], str]

_provider: Optional[MessageProvider] = None


def set_message_provider(provider: Optional[MessageProvider]) -> None:
    """Install ``provider`` as the message lookup; ``None`` restores the defaults."""
    global _provider
    _provider = provider


def get_message(code: ErrorCode) -> str:
    """
    Return the message for ``code``.

    Falls back to the built-in message when the installed provider has no
    entry for the code (raises ``KeyError`` or returns an empty string).
    """
    if _provider is not None:
        try:
            message = _provider(code)
        except KeyError:
            message = ""
        if message:
            return message
    return DEFAULT_MESSAGES[code]


class ChromascaleError(ValueError):
    """Base class for validation errors raised by chromascale."""

    default_code: ErrorCode

    def __init__(self, argument: str, code: Optional[ErrorCode] = None, detail: Optional[str] = None) -> None:
        self.argument = argument
        self.code = code if code is not None else self.default_code
        message = f"{argument}: {get_message(self.code)}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class NullOrMissingInputError(ChromascaleError):
    default_code = ErrorCode.NULL_OR_EMPTY


class InvalidLengthError(ChromascaleError):
    default_code = ErrorCode.WRONG_COLOR_DATA_ARRAY_SIZE


class OutOfRangeError(ChromascaleError):
    default_code = ErrorCode.VALUE_NOT_PERCENTAGE


def check_unit_interval(value: float, argument: str) -> float:
    """Raise :class:`OutOfRangeError` unless ``0 <= value <= 1`` (NaN fails)."""
    if not 0.0 <= value <= 1.0:
        raise OutOfRangeError(argument, detail=f"got {value!r}")
    return value


__all__ = [
    "ErrorCode",
    "DEFAULT_MESSAGES",
    "MessageProvider",
    "set_message_provider",
    "get_message",
    "ChromascaleError",
    "NullOrMissingInputError",
    "InvalidLengthError",
    "OutOfRangeError",
    "check_unit_interval",
]
