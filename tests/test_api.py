"""Tests for the library entry points."""

from __future__ import annotations

from unittest import mock

import pytest

from telefy import get_channels, send_message, send_message_with_buttons
from telefy.errors import ConfigError, TransportError, ValidationError


class TestGetChannels:
    def test_reads_given_snapshot(self, channel_env):
        channels = get_channels(env=channel_env)
        assert list(channels) == ["news", "alert"]
        assert channels["news"].chat_id == "123456"

    def test_repeat_calls_match(self, channel_env):
        first = get_channels(env=channel_env)
        second = get_channels(env=channel_env)
        assert first == second

    def test_defaults_to_environment(self, channel_env):
        with mock.patch("telefy.api.load_environment", return_value=channel_env) as load:
            channels = get_channels()
        load.assert_called_once_with()
        assert list(channels) == ["news", "alert"]


class TestSendMessage:
    def test_sends_with_env_snapshot(self, channel_env, client, telegram):
        results = send_message("Hello", "news", env=channel_env, client=client)
        assert [r.channel for r in results] == ["news"]
        assert telegram.payloads == [
            {"chat_id": "123456", "text": "Hello", "parse_mode": "Markdown"}
        ]

    def test_uses_given_registry(self, registry, client, telegram):
        results = send_message("Hello", registry=registry, client=client)
        assert [r.channel for r in results] == ["news", "alert"]

    def test_no_channels_configured(self, client, telegram):
        with pytest.raises(ConfigError) as exc:
            send_message("Hello", "all", env={"HOME": "/root"}, client=client)
        assert exc.value.message == "No channels configured"
        assert telegram.requests == []

    def test_builds_and_closes_own_client(self, channel_env, patched_client):
        results = send_message("Hello", "alert", env=channel_env)
        assert [r.channel for r in results] == ["alert"]
        assert patched_client.urls == ["https://api.telegram.org/bot789:XYZ/sendMessage"]

    def test_error_propagates(self, channel_env, client, telegram):
        telegram.reply(403, {"ok": False, "description": "Forbidden: bot was blocked by the user"})
        with pytest.raises(TransportError) as exc:
            send_message("Hi", "news", env=channel_env, client=client)
        assert exc.value.message == (
            'Forbidden on channel "news": Forbidden: bot was blocked by the user'
        )


class TestSendMessageWithButtons:
    def test_sends_inline_keyboard(self, channel_env, client, telegram):
        buttons = [
            [
                {"text": "Experiences", "url": "https://example.com/#resume"},
                {"text": "Skillset", "url": "https://example.com/#skillset"},
            ]
        ]
        results = send_message_with_buttons(
            "*Read the docs:*", buttons, "news", env=channel_env, client=client
        )
        assert len(results) == 1
        assert telegram.payloads[0]["reply_markup"] == {"inline_keyboard": buttons}

    def test_missing_url_rejected(self, channel_env, client, telegram):
        with pytest.raises(ValidationError, match="Each button must have text and url properties"):
            send_message_with_buttons(
                "Hi", [[{"text": "Visit"}]], "news", env=channel_env, client=client
            )
        assert telegram.requests == []

    def test_no_channels_configured(self, client, telegram):
        with pytest.raises(ConfigError, match="No channels configured"):
            send_message_with_buttons(
                "Hi", [[{"text": "Visit", "url": "https://x.io"}]], env={}, client=client
            )
        assert telegram.requests == []
