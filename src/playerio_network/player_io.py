""" player_io.py

Entry point for connecting to a game hosted on Player.IO.

A PlayerIO instance owns the one HttpChannel that all of its connect calls and all the Clients they produce share. The channel (and the QuickConnect wrapping it) \
is only created the first time something needs it, using the channel factory given at construction. Pass your own factory to swap the channel out, e.g. in tests.
"""
import logging
from typing import Callable, Optional

from .client import Client
from .protocol.http_channel import HttpChannel
from .protocol.message_helpers import ApiResult
from .protocol.messages import (ActionCode, ConnectArgs, ConnectOutput,
                                PlayerIOError)
from .quick_connect import QuickConnect, client_from_output
from .settings import ChannelSettings
from .utils import calc_auth

logger = logging.getLogger(__name__)


class PlayerIO:
    def __init__(self, settings: Optional[ChannelSettings] = None, channel_factory: Optional[Callable[[ChannelSettings], HttpChannel]] = None):
        self._settings: ChannelSettings = settings if settings is not None else ChannelSettings.from_env()
        self._channel_factory: Callable[[ChannelSettings], HttpChannel] = channel_factory if channel_factory is not None else HttpChannel
        self._channel: Optional[HttpChannel] = None
        self._quick_connect: Optional[QuickConnect] = None

    @property
    def settings(self) -> ChannelSettings:
        return self._settings

    @property
    def channel(self) -> HttpChannel:
        if self._channel is None:
            logger.debug("Creating channel for %s", self._settings.api_endpoint)
            self._channel = self._channel_factory(self._settings)
        return self._channel

    @property
    def quick_connect(self) -> QuickConnect:
        if self._quick_connect is None:
            self._quick_connect = QuickConnect(self.channel)
        return self._quick_connect

    async def connect(self, game_id: str, connection_id: str, user_id: str, auth: Optional[str] = None) -> ApiResult[Client, PlayerIOError]:
        """Connect to a game as the given user.

        :param game_id: The ID of the game you wish to connect to. This value can be found in the admin panel.
        :param connection_id: The ID of the connection, as given in the settings section of the admin panel. 'public' should be used as the default.
        :param user_id: The ID of the user you wish to authenticate.
        :param auth: Only if the connection accepts authenticated requests only: the auth value for user_id, see calc_auth.
        """
        args = ConnectArgs(game_id=game_id, connection_id=connection_id, user_id=user_id, auth=auth or "")
        logger.info("Sending connect for game %s on connection %s", game_id, connection_id)
        result = await self.channel.request(ActionCode.Connect, args, ConnectOutput, PlayerIOError)
        return client_from_output(self.channel, result)

    calc_auth = staticmethod(calc_auth)

    async def close(self):
        if self._channel is not None:
            await self._channel.close()
            self._channel = None
            self._quick_connect = None

    async def __aenter__(self) -> "PlayerIO":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
