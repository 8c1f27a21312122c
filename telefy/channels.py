"""Channel registry built from CHANNEL_<NAME>_TOKEN / CHANNEL_<NAME>_CHAT_ID pairs."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from telefy.errors import ConfigError
from telefy.models import DEFAULT_API_URL, Channel


TOKEN_KEY_PATTERN = re.compile(r"^CHANNEL_(?P<name>.+)_TOKEN$")


def chat_id_key(name: str) -> str:
    return f"CHANNEL_{name.upper()}_CHAT_ID"


class ChannelRegistry:
    """Ordered, non-empty mapping of channel name to Channel.

    Populated once and treated as read-only afterwards.
    """

    def __init__(self, channels: Iterable[Channel]) -> None:
        self._channels: dict[str, Channel] = {}
        for channel in channels:
            self._channels[channel.name] = channel
        if not self._channels:
            raise ConfigError(
                "No channels configured",
                "Add at least one channel with CHANNEL_<name>_TOKEN and "
                "CHANNEL_<name>_CHAT_ID in your .env file. See .env.sample.",
            )

    def get_channels(self) -> dict[str, Channel]:
        """Return the live mapping. Callers must not mutate it."""
        return self._channels

    def names(self) -> list[str]:
        return list(self._channels)

    def get(self, name: str) -> Channel | None:
        return self._channels.get(name.lower())

    def __iter__(self):
        return iter(self._channels.values())

    def __len__(self) -> int:
        return len(self._channels)


def load_channels(
    config_source: Mapping[str, str], api_url: str = DEFAULT_API_URL
) -> ChannelRegistry:
    """Scan a key/value snapshot (usually the environment) for channel definitions.

    Any key shaped like CHANNEL_<NAME>_TOKEN defines a channel named <NAME>
    lowercased, paired with CHANNEL_<NAME>_CHAT_ID. Channels keep the order
    their token keys appear in the snapshot.
    """
    channels: list[Channel] = []
    for key, value in config_source.items():
        match = TOKEN_KEY_PATTERN.match(key)
        if not match:
            continue

        name = match.group("name").lower()
        paired_key = chat_id_key(name)
        token = value
        chat_id = config_source.get(paired_key)

        if not token:
            raise ConfigError(
                f'Invalid token for channel "{name}"',
                f"Ensure {key} is set in your .env file.",
            )
        if not chat_id:
            raise ConfigError(
                f'Missing chat ID for channel "{name}"',
                f"Set {paired_key} in your .env file. See .env.sample for details.",
            )

        channels.append(Channel(name=name, token=token, chat_id=chat_id, api_url=api_url))

    return ChannelRegistry(channels)
