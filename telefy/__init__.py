"""Telefy: send Telegram notifications to named channels."""

__version__ = "1.1.0"

import logging  # noqa: E402

logging.getLogger(__name__).addHandler(logging.NullHandler())

from telefy.api import get_channels, send_message, send_message_with_buttons  # noqa: E402
from telefy.errors import (  # noqa: E402
    ChannelNotFoundError,
    ConfigError,
    ErrorKind,
    NetworkError,
    TelefyError,
    TransportError,
    UnexpectedError,
    ValidationError,
)
from telefy.models import Channel, ParseMode, SendResult  # noqa: E402

__all__ = [
    "Channel",
    "ChannelNotFoundError",
    "ConfigError",
    "ErrorKind",
    "NetworkError",
    "ParseMode",
    "SendResult",
    "TelefyError",
    "TransportError",
    "UnexpectedError",
    "ValidationError",
    "get_channels",
    "send_message",
    "send_message_with_buttons",
]
