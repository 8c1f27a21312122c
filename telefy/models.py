"""Core data models."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any


DEFAULT_API_URL = "https://api.telegram.org"


class ParseMode(str, Enum):
    MARKDOWN = "Markdown"
    HTML = "HTML"
    MARKDOWN_V2 = "MarkdownV2"


@dataclass(frozen=True)
class Channel:
    name: str  # Lowercase registry key
    token: str
    chat_id: str
    api_url: str = DEFAULT_API_URL

    @property
    def base_url(self) -> str:
        return f"{self.api_url}/bot{self.token}"


@dataclass
class OutboundMessage:
    text: str
    parse_mode: str = ParseMode.MARKDOWN.value
    buttons: Sequence[Sequence[Mapping[str, str]]] | None = None

    def to_payload(self, chat_id: str) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "chat_id": chat_id,
            "text": self.text,
            "parse_mode": self.parse_mode,
        }
        if self.buttons is not None:
            payload["reply_markup"] = {
                "inline_keyboard": [[dict(button) for button in row] for row in self.buttons]
            }
        return payload


@dataclass
class SendResult:
    channel: str
    response: Any  # Decoded Telegram API response body
