""" http_channel.py

The request channel. Every call to the Player.IO web api is one POST of a serialized message to <endpoint>/<method id>, answered by a small envelope:

    byte 0        1 if a player token header follows, anything else if not
    [2 bytes]     big-endian length of the token   } only if byte 0 was 1
    [n bytes]     utf-8 player token               }
    next byte     1 if the call succeeded, anything else if it failed
    rest          the serialized output message on success, the serialized error message otherwise

One channel is meant to be shared by every connect call and every Client it produces. It keeps no per-call state, the only thing it owns is the aiohttp session.
"""
import asyncio
import logging
from typing import Optional, Tuple, Type, TypeVar

import aiohttp
from aiohttp.client import ClientSession
from betterproto import Message
from galaxy.api.errors import UnknownBackendResponse
from galaxy.http import (create_client_session, create_tcp_connector,
                         handle_exception)

from ..settings import ChannelSettings
from .message_helpers import ApiResult, message_name

logger = logging.getLogger(__name__)

PLAYER_TOKEN_HEADER = "playertoken"

T = TypeVar("T", bound=Message)
E = TypeVar("E", bound=Message)


def create_session(settings: ChannelSettings) -> ClientSession:
    """galaxy's client session (certifi ssl context, raise_for_status) with our limit and timeout."""
    connector = create_tcp_connector(limit=settings.connection_limit)
    timeout = aiohttp.ClientTimeout(total=settings.timeout)
    return create_client_session(connector=connector, timeout=timeout)


def read_envelope(data: bytes) -> Tuple[Optional[str], bool, bytes]:
    """Split a response into (player token or None, success flag, message bytes)."""
    offset = 0
    player_token: Optional[str] = None
    try:
        if data[offset] == 1:
            token_length = int.from_bytes(data[offset + 1:offset + 3], "big")
            offset += 3
            token_bytes = data[offset:offset + token_length]
            if len(token_bytes) != token_length:
                raise IndexError("player token is truncated")
            player_token = token_bytes.decode("utf-8")
            offset += token_length
        else:
            offset += 1
        success = data[offset] == 1
    except (IndexError, UnicodeDecodeError):
        logger.exception("Can not parse backend response envelope")
        raise UnknownBackendResponse()
    return player_token, success, data[offset + 1:]


class HttpChannel:
    """Wrapper for aiohttp.ClientSession that sends Player.IO web api requests and parses the envelope they come back in.
    """
    def __init__(self, settings: Optional[ChannelSettings] = None, session: Optional[ClientSession] = None):
        self._settings: ChannelSettings = settings if settings is not None else ChannelSettings()
        # the session is created on the first request so that the channel itself can be built outside of a running loop.
        self._session: Optional[ClientSession] = session
        # loop the session was created on. None for a session handed in by the caller, that one is used as is.
        self._session_loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def settings(self) -> ChannelSettings:
        return self._settings

    async def close(self):
        if self._session is None:
            return
        if self._is_stale():
            self._drop_session()
        else:
            await self._session.close()
            self._session = None
            self._session_loop = None

    def _is_stale(self) -> bool:
        # an aiohttp session is bound to the loop it was created on. a caller using asyncio.run more than once gets a new loop each time.
        if self._session_loop is None:
            return False
        return self._session_loop.is_closed() or self._session_loop is not asyncio.get_running_loop()

    def _drop_session(self):
        logger.info("Event loop changed since the http session was created, replacing it")
        # the old loop can no longer run the close, detaching marks the session closed without touching its connector.
        self._session.detach()
        self._session = None
        self._session_loop = None

    def _get_session(self) -> ClientSession:
        if self._session is not None and self._is_stale():
            self._drop_session()
        if self._session is None:
            self._session = create_session(self._settings)
            self._session_loop = asyncio.get_running_loop()
        return self._session

    def _url(self, method: int) -> str:
        return f"{self._settings.api_endpoint}/{int(method)}"

    async def _post(self, method: int, data: bytes, token: Optional[str]) -> bytes:
        headers = {PLAYER_TOKEN_HEADER: token} if token else {}
        with handle_exception():
            async with self._get_session().post(self._url(method), data=data, headers=headers) as response:
                return await response.read()

    async def request(self, method: int, args: Message, output_type: Type[T], error_type: Type[E], token: Optional[str] = None) -> ApiResult[T, E]:
        """Send args to the given method id and return the parsed output or error. Transport failures raise, error payloads do not."""
        if self._settings.log_sensitive_data:
            logger.debug("Request %d payload: %r", method, args)
        logger.info("[Out] %d -> %s", method, message_name(args))

        data = await self._post(method, bytes(args), token)
        player_token, success, body = read_envelope(data)
        logger.debug("Response to %d: %d bytes, success=%s, player token %s", method, len(data), success, "present" if player_token else "absent")

        if success:
            output = _parse(output_type, body)
            logger.info("[In] %d -> %s", method, message_name(output_type))
            return ApiResult(body=output, player_token=player_token)

        error = _parse(error_type, body)
        logger.info("[In] %d -> %s", method, message_name(error_type))
        return ApiResult(error=error, player_token=player_token)


def _parse(message_type: Type[T], body: bytes) -> T:
    try:
        return message_type().parse(body)
    except (ValueError, IndexError, UnicodeDecodeError):
        logger.exception("Can not parse %s from backend response", message_name(message_type))
        raise UnknownBackendResponse()
