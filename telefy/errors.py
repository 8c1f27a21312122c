"""Error taxonomy shared by the library and the CLI."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    CONFIG = "config"
    VALIDATION = "validation"
    CHANNEL_NOT_FOUND = "channel_not_found"
    TRANSPORT = "transport"  # Telegram answered with an error status
    NETWORK = "network"  # No response received
    UNEXPECTED = "unexpected"


class TelefyError(Exception):
    """Base error. Every error carries a message and an actionable suggestion."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, suggestion: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion


class ConfigError(TelefyError):
    kind = ErrorKind.CONFIG


class ValidationError(TelefyError):
    kind = ErrorKind.VALIDATION


class ChannelNotFoundError(TelefyError):
    kind = ErrorKind.CHANNEL_NOT_FOUND


class TransportError(TelefyError):
    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, suggestion: str = "", status_code: int | None = None) -> None:
        super().__init__(message, suggestion)
        self.status_code = status_code


class NetworkError(TelefyError):
    kind = ErrorKind.NETWORK


class UnexpectedError(TelefyError):
    kind = ErrorKind.UNEXPECTED
