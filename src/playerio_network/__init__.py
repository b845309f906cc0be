"""playerio_network directory (and corresponding __init__.py)

Client side authentication against Player.IO's web api. PlayerIO is the entry point: it owns the shared http channel and hands out Clients \
(a token plus the resolved user id) for every successful connect. Quick connect methods (simple users, Facebook, Kongregate, Steam) live on PlayerIO.quick_connect.

Every connect returns an ApiResult. Check is_success, or call unwrap() to get the Client or have the service error raised as a ServiceError.
Transport problems (no connection, timeout, bad status) are raised directly as galaxy api errors, see errors.py.
"""
from .client import Client
from .errors import (AccessDenied, AuthenticationRequired, BackendError,
                     BackendNotAvailable, BackendTimeout, NetworkError,
                     RegistrationError, ServiceError, TooManyRequests,
                     UnknownBackendResponse, UnknownError)
from .player_io import PlayerIO
from .protocol.http_channel import HttpChannel
from .protocol.message_helpers import ApiResult
from .quick_connect import QuickConnect
from .settings import ChannelSettings
from .utils import calc_auth
