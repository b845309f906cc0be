import logging
from typing import Mapping, Optional

from .client import Client
from .protocol.http_channel import HttpChannel
from .protocol.message_helpers import ApiResult, to_key_value_pairs
from .protocol.messages import (ActionCode, ConnectOutput,
                                FacebookOAuthConnectArgs,
                                KongregateConnectArgs, NoArgsOrOutput,
                                PlayerIOError, PlayerIORegistrationError,
                                SimpleConnectArgs, SimpleRecoverPasswordArgs,
                                SimpleRegisterArgs, SteamConnectArgs)

logger = logging.getLogger(__name__)


def client_from_output(channel: HttpChannel, result: ApiResult[ConnectOutput, PlayerIOError]) -> ApiResult[Client, PlayerIOError]:
    """Wrap a successful connect output into a Client on the same channel. Errors are passed through as they came in."""
    if not result.is_success:
        logger.warning("Connect failed: %r", result.error)
    return result.map(lambda output: Client(channel, output.token, output.user_id))


class QuickConnect:
    """Connects to a game through one of the quick connect methods: Player.IO's own simple users, or a third party identity (Facebook, Kongregate, Steam).

    Nothing is validated here, the web service decides what is acceptable. Each call is exactly one request; the result is either a Client or the error payload.
    """
    def __init__(self, channel: HttpChannel):
        self._channel: HttpChannel = channel

    #region Connect
    async def simple_connect(self, game_id: str, username_or_email: str, password: str) -> ApiResult[Client, PlayerIOError]:
        """Connect as a simple user.

        :param game_id: The ID of the game you wish to connect to. This value can be found in the admin panel.
        :param username_or_email: The username or e-mail address of the user you wish to authenticate.
        :param password: The password of the user you wish to authenticate.
        """
        args = SimpleConnectArgs(game_id=game_id, username_or_email=username_or_email, password=password)
        logger.info("Sending simple connect for game %s", game_id)
        result = await self._channel.request(ActionCode.SimpleConnect, args, ConnectOutput, PlayerIOError)
        return client_from_output(self._channel, result)

    async def facebook_oauth_connect(self, game_id: str, access_token: str) -> ApiResult[Client, PlayerIOError]:
        """Connect as a Facebook user, given that user's Facebook access token."""
        args = FacebookOAuthConnectArgs(game_id=game_id, access_token=access_token)
        logger.info("Sending facebook connect for game %s", game_id)
        result = await self._channel.request(ActionCode.FacebookOAuthConnect, args, ConnectOutput, PlayerIOError)
        return client_from_output(self._channel, result)

    async def kongregate_connect(self, game_id: str, user_id: str, game_auth_token: str) -> ApiResult[Client, PlayerIOError]:
        """Connect as a Kongregate user. game_auth_token is the Kongregate auth token of that user for this game."""
        args = KongregateConnectArgs(game_id=game_id, user_id=user_id, game_auth_token=game_auth_token)
        logger.info("Sending kongregate connect for game %s", game_id)
        result = await self._channel.request(ActionCode.KongregateConnect, args, ConnectOutput, PlayerIOError)
        return client_from_output(self._channel, result)

    async def steam_connect(self, game_id: str, steam_app_id: str, steam_session_ticket: str) -> ApiResult[Client, PlayerIOError]:
        args = SteamConnectArgs(game_id=game_id, steam_app_id=steam_app_id, steam_session_ticket=steam_session_ticket)
        logger.info("Sending steam connect for game %s (app %s)", game_id, steam_app_id)
        result = await self._channel.request(ActionCode.SteamConnect, args, ConnectOutput, PlayerIOError)
        return client_from_output(self._channel, result)
    #endregion

    async def simple_register(self, game_id: str, username: str, password: str, email: Optional[str] = None,
                              captcha_key: Optional[str] = None, captcha_value: Optional[str] = None,
                              extra_data: Optional[Mapping[str, str]] = None) -> ApiResult[Client, PlayerIORegistrationError]:
        """Register a new simple user and connect as that user.

        :param email: The e-mail address of the new user. Needed for password recovery later on.
        :param captcha_key: Only if captcha is required: the key of the captcha image shown to the user.
        :param captcha_value: Only if captcha is required: what the user typed in response to the captcha image.
        :param extra_data: Anything else to store with the user, such as gender, birthdate, etc.
        :return: the Client of the newly registered user, or the registration error explaining which field was refused.
        """
        args = SimpleRegisterArgs(
            game_id=game_id,
            username=username,
            password=password,
            email=email or "",
            captcha_key=captcha_key or "",
            captcha_value=captcha_value or "",
            extra_data=to_key_value_pairs(extra_data),
        )
        logger.info("Sending simple register for game %s", game_id)
        result = await self._channel.request(ActionCode.SimpleRegister, args, ConnectOutput, PlayerIORegistrationError)
        return client_from_output(self._channel, result)

    async def simple_recover_password(self, game_id: str, username_or_email: str) -> ApiResult[NoArgsOrOutput, PlayerIOError]:
        """Start password recovery for a simple user that registered with an e-mail address. The service mails the user, nothing comes back on success."""
        args = SimpleRecoverPasswordArgs(game_id=game_id, username_or_email=username_or_email)
        logger.info("Sending password recovery for game %s", game_id)
        result = await self._channel.request(ActionCode.SimpleRecoverPassword, args, NoArgsOrOutput, PlayerIOError)
        if not result.is_success:
            logger.warning("Password recovery failed: %r", result.error)
        return result
