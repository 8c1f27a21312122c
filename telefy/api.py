"""Library entry points."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import httpx

from telefy.channels import ChannelRegistry, load_channels
from telefy.config import load_environment
from telefy.dispatcher import ALL_CHANNELS, Dispatcher
from telefy.models import DEFAULT_API_URL, Channel, ParseMode, SendResult


def _registry(
    registry: ChannelRegistry | None, env: Mapping[str, str] | None
) -> ChannelRegistry:
    if registry is not None:
        return registry
    return load_channels(env if env is not None else load_environment())


def get_channels(
    env: Mapping[str, str] | None = None, api_url: str = DEFAULT_API_URL
) -> dict[str, Channel]:
    """Return configured channels keyed by name, in discovery order."""
    source = env if env is not None else load_environment()
    return load_channels(source, api_url=api_url).get_channels()


def send_message(
    text: str,
    channel: str = ALL_CHANNELS,
    parse_mode: str = ParseMode.MARKDOWN.value,
    *,
    registry: ChannelRegistry | None = None,
    client: httpx.Client | None = None,
    env: Mapping[str, str] | None = None,
) -> list[SendResult]:
    """Send a text message to one channel or to all of them."""
    with Dispatcher(_registry(registry, env), client=client) as dispatcher:
        return dispatcher.send(text, channel=channel, parse_mode=parse_mode)


def send_message_with_buttons(
    text: str,
    buttons: Sequence[Sequence[Mapping[str, str]]],
    channel: str = ALL_CHANNELS,
    parse_mode: str = ParseMode.MARKDOWN.value,
    *,
    registry: ChannelRegistry | None = None,
    client: httpx.Client | None = None,
    env: Mapping[str, str] | None = None,
) -> list[SendResult]:
    """Send a message with an inline keyboard of URL buttons."""
    with Dispatcher(_registry(registry, env), client=client) as dispatcher:
        return dispatcher.send(text, channel=channel, parse_mode=parse_mode, buttons=buttons)
