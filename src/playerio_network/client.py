import logging
from typing import Type, TypeVar

from betterproto import Message

from .protocol.http_channel import HttpChannel
from .protocol.message_helpers import ApiResult

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Message)
E = TypeVar("E", bound=Message)


class Client:
    """An authenticated session with a Player.IO game, as returned by a successful connect.

    The channel is shared with the PlayerIO instance that created this client (and every other client it created), the token and user id are our own.
    There is nothing to close, drop the reference when done.
    """
    def __init__(self, channel: HttpChannel, token: str, user_id: str):
        self._channel: HttpChannel = channel
        self._token: str = token
        self._user_id: str = user_id

    @property
    def channel(self) -> HttpChannel:
        return self._channel

    @property
    def token(self) -> str:
        return self._token

    @property
    def user_id(self) -> str:
        return self._user_id

    async def request(self, method: int, args: Message, output_type: Type[T], error_type: Type[E]) -> ApiResult[T, E]:
        """Send a request on the shared channel, authenticated as this session."""
        logger.debug("Sending request %d as user %s", method, self._user_id)
        return await self._channel.request(method, args, output_type, error_type, token=self._token)

    def __repr__(self):
        token = self._token if self._channel.settings.log_sensitive_data else "***"
        return f"Client(user_id={self._user_id!r}, token={token!r})"
