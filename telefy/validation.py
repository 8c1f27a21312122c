"""Input checks shared by both send operations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from telefy.errors import ValidationError
from telefy.models import ParseMode


MAX_MESSAGE_LENGTH = 4096

VALID_PARSE_MODES = [mode.value for mode in ParseMode]


def validate_message(text: Any, parse_mode: Any) -> None:
    if not isinstance(text, str) or not text:
        raise ValidationError(
            "Text parameter must be a non-empty string",
            "Provide a valid message text.",
        )
    if len(text) > MAX_MESSAGE_LENGTH:
        raise ValidationError(
            f"Message text exceeds {MAX_MESSAGE_LENGTH} characters",
            f"Shorten the message to {MAX_MESSAGE_LENGTH} characters or less.",
        )
    # ParseMode members compare equal to their string values
    if not isinstance(parse_mode, str) or parse_mode not in VALID_PARSE_MODES:
        raise ValidationError(
            f"Invalid parseMode: {parse_mode}",
            f"Use one of: {', '.join(VALID_PARSE_MODES)}.",
        )


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def validate_buttons(buttons: Any) -> None:
    """Check an inline keyboard: a list of rows, each a list of {text, url}."""
    if not _is_array(buttons):
        raise ValidationError(
            "Buttons must be an array of arrays",
            'Provide buttons in the format: [[{"text": "Button", "url": "https://example.com"}]].',
        )
    for row in buttons:
        if not _is_array(row):
            raise ValidationError(
                "Each button row must be an array",
                "Ensure buttons is an array of arrays.",
            )
        for button in row:
            if not isinstance(button, Mapping) or not button.get("text") or not button.get("url"):
                raise ValidationError(
                    "Each button must have text and url properties",
                    'Example: {"text": "Visit", "url": "https://example.com"}.',
                )
