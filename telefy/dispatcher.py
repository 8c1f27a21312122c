"""Sequential, fail-fast message dispatch to one or all channels."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from telefy.channels import ChannelRegistry
from telefy.classifier import classify, classify_response
from telefy.errors import ChannelNotFoundError
from telefy.models import Channel, OutboundMessage, ParseMode, SendResult
from telefy.validation import validate_buttons, validate_message

logger = logging.getLogger(__name__)

ALL_CHANNELS = "all"
DEFAULT_TIMEOUT = 10.0


def resolve_channels(registry: ChannelRegistry, selector: str) -> list[Channel]:
    """Resolve "all" or a channel name (case-insensitive) to target channels."""
    if selector == ALL_CHANNELS:
        return list(registry)

    name = selector.lower()
    channel = registry.get(name)
    if channel is None:
        raise ChannelNotFoundError(
            f'Channel "{name}" not found',
            f"Available channels: {', '.join(registry.names())}. Check your .env file.",
        )
    return [channel]


class Dispatcher:
    """Sends messages through the Telegram Bot API.

    Channels are processed in registry order, one POST each. The first
    failure is classified and raised; channels after it are not attempted
    and results gathered so far are discarded.
    """

    def __init__(
        self,
        registry: ChannelRegistry,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.registry = registry
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Dispatcher:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def send(
        self,
        text: str,
        channel: str = ALL_CHANNELS,
        parse_mode: str = ParseMode.MARKDOWN.value,
        buttons: Sequence[Sequence[Mapping[str, str]]] | None = None,
    ) -> list[SendResult]:
        validate_message(text, parse_mode)
        if buttons is not None:
            validate_buttons(buttons)

        targets = resolve_channels(self.registry, channel)
        message = OutboundMessage(
            text=text, parse_mode=ParseMode(parse_mode).value, buttons=buttons
        )

        results: list[SendResult] = []
        for target in targets:
            body = self._post(target, message)
            logger.info("Message sent to channel %s", target.name)
            results.append(SendResult(channel=target.name, response=body))
        return results

    def _post(self, channel: Channel, message: OutboundMessage) -> Any:
        url = f"{channel.base_url}/sendMessage"
        logger.debug("POST sendMessage for channel %s", channel.name)
        try:
            response = self._client.post(url, json=message.to_payload(channel.chat_id))
            response.raise_for_status()
            body = response.json()
        except Exception as e:
            error = classify(e, channel.name)
            logger.warning("Send failed on channel %s: %s", channel.name, error.message)
            raise error from e

        if isinstance(body, dict) and body.get("ok") is False:
            error = classify_response(response, channel.name)
            logger.warning("Send failed on channel %s: %s", channel.name, error.message)
            raise error
        return body
