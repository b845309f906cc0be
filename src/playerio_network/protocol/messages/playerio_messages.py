""" playerio_messages.py

Message definitions for the Player.IO web api. Field numbers are what the service keys on, so they must never change; names are ours.

Proto3 semantics apply (betterproto): an empty string is "not set" and is not written to the wire. The service treats a missing optional string and an empty one the same, \
so optional arguments are modelled as plain strings and callers pass None at the api level.
"""
from dataclasses import dataclass
from typing import List

import betterproto

from .playerio_enumerations import ErrorCode


@dataclass
class KeyValuePair(betterproto.Message):
    key: str = betterproto.string_field(1)
    value: str = betterproto.string_field(2)


@dataclass
class NoArgsOrOutput(betterproto.Message):
    pass


@dataclass
class ConnectArgs(betterproto.Message):
    game_id: str = betterproto.string_field(1)
    connection_id: str = betterproto.string_field(2)
    user_id: str = betterproto.string_field(3)
    auth: str = betterproto.string_field(4)


@dataclass
class ConnectOutput(betterproto.Message):
    token: str = betterproto.string_field(1)
    user_id: str = betterproto.string_field(2)


@dataclass
class SimpleConnectArgs(betterproto.Message):
    game_id: str = betterproto.string_field(1)
    username_or_email: str = betterproto.string_field(2)
    password: str = betterproto.string_field(3)


@dataclass
class FacebookOAuthConnectArgs(betterproto.Message):
    game_id: str = betterproto.string_field(1)
    access_token: str = betterproto.string_field(2)


@dataclass
class KongregateConnectArgs(betterproto.Message):
    game_id: str = betterproto.string_field(1)
    user_id: str = betterproto.string_field(2)
    game_auth_token: str = betterproto.string_field(3)


@dataclass
class SteamConnectArgs(betterproto.Message):
    game_id: str = betterproto.string_field(1)
    steam_app_id: str = betterproto.string_field(2)
    steam_session_ticket: str = betterproto.string_field(3)


@dataclass
class SimpleRegisterArgs(betterproto.Message):
    game_id: str = betterproto.string_field(1)
    username: str = betterproto.string_field(2)
    password: str = betterproto.string_field(3)
    email: str = betterproto.string_field(4)
    captcha_key: str = betterproto.string_field(5)
    captcha_value: str = betterproto.string_field(6)
    extra_data: List[KeyValuePair] = betterproto.message_field(7)


@dataclass
class SimpleRecoverPasswordArgs(betterproto.Message):
    game_id: str = betterproto.string_field(1)
    username_or_email: str = betterproto.string_field(2)


@dataclass
class PlayerIOError(betterproto.Message):
    """General error payload. error_code is left as an int32 on purpose, see ErrorCode."""
    error_code: int = betterproto.int32_field(1)
    message: str = betterproto.string_field(2)

    @property
    def error_kind(self) -> ErrorCode:
        return ErrorCode.from_value(self.error_code)


@dataclass
class PlayerIORegistrationError(betterproto.Message):
    """Error payload for simple registration. Each *_error field is empty unless that input was rejected."""
    error_code: int = betterproto.int32_field(1)
    message: str = betterproto.string_field(2)
    username_error: str = betterproto.string_field(3)
    password_error: str = betterproto.string_field(4)
    email_error: str = betterproto.string_field(5)
    captcha_error: str = betterproto.string_field(6)

    @property
    def error_kind(self) -> ErrorCode:
        return ErrorCode.from_value(self.error_code)
