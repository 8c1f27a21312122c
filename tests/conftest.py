"""Shared fixtures for telefy tests."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from unittest import mock

import httpx
import pytest

from telefy.channels import load_channels

RealClient = httpx.Client


class FakeTelegram:
    """Records sendMessage POSTs and answers them from a queue of canned replies."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._replies: list = []

    def reply(self, status: int = 200, body=None) -> None:
        if body is None:
            body = {"ok": True, "result": {"message_id": len(self._replies) + 1}}
        self._replies.append((status, body))

    def fail(self, exc_type=httpx.ConnectError, message: str = "connection refused") -> None:
        self._replies.append(exc_type(message))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self._replies.pop(0) if self._replies else (200, {"ok": True, "result": {}})
        if isinstance(reply, Exception):
            raise reply
        status, body = reply
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    def client(self) -> httpx.Client:
        return RealClient(transport=httpx.MockTransport(self.handler))

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def channel_env():
    """Two channels, news first."""
    return {
        "CHANNEL_NEWS_TOKEN": "123:ABC",
        "CHANNEL_NEWS_CHAT_ID": "123456",
        "CHANNEL_ALERT_TOKEN": "789:XYZ",
        "CHANNEL_ALERT_CHAT_ID": "789012",
        "HOME": "/home/user",
    }


@pytest.fixture
def registry(channel_env):
    return load_channels(channel_env)


@pytest.fixture
def telegram():
    return FakeTelegram()


@pytest.fixture
def client(telegram):
    c = telegram.client()
    yield c
    c.close()


@pytest.fixture
def patched_client(telegram):
    """Route clients the Dispatcher builds for itself through the fake API."""

    def _make_client(**kwargs):
        return RealClient(transport=httpx.MockTransport(telegram.handler), **kwargs)

    with mock.patch("telefy.dispatcher.httpx.Client", side_effect=_make_client):
        yield telegram


@pytest.fixture
def tmp_config(tmp_path):
    """Write a telefy.yml and return its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "telefy.yml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


@pytest.fixture
def env_file(tmp_path):
    """Write a .env file and return its path."""

    def _write(content: str) -> Path:
        p = tmp_path / ".env"
        p.write_text(textwrap.dedent(content))
        return p

    return _write
