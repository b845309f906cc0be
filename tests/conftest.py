"""
Shared pytest fixtures for playerio_network tests.

This module provides:
- make_channel: a mocked request channel whose request() answers with canned ApiResults
- envelope helpers to build raw web service responses
"""

import os
import sys
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from playerio_network.protocol.message_helpers import ApiResult  # noqa: E402
from playerio_network.settings import ChannelSettings  # noqa: E402


def build_envelope(body: bytes, success: bool = True, player_token: Optional[str] = None) -> bytes:
    """Build a raw response the way the web service frames it."""
    if player_token is None:
        header = b"\x00"
    else:
        token = player_token.encode("utf-8")
        header = b"\x01" + len(token).to_bytes(2, "big") + token
    return header + (b"\x01" if success else b"\x00") + body


def make_session(response_body: bytes) -> MagicMock:
    """Create a fake aiohttp session whose post() answers with the given body."""
    response = MagicMock()
    response.read = AsyncMock(return_value=response_body)
    session = MagicMock()
    session.post.return_value.__aenter__.return_value = response
    session.close = AsyncMock()
    return session


@pytest.fixture
def settings():
    return ChannelSettings(api_endpoint="https://api.test/api", timeout=5, connection_limit=2)


@pytest.fixture
def make_channel(settings):
    """Create a mocked channel. request() returns the given ApiResult for every call."""
    def _make(result: ApiResult) -> MagicMock:
        channel = MagicMock()
        channel.settings = settings
        channel.request = AsyncMock(return_value=result)
        channel.close = AsyncMock()
        return channel
    return _make
