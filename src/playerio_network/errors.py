""" errors.py

Exceptions raised by this package. There are two families:

Transport errors are raised straight out of a request when we never got a usable answer from the web service (no connection, timeout, bad status, garbage body).
Those are the galaxy api errors, produced by galaxy.http.handle_exception, and are re-exported here so callers only need one import.
Service errors describe an answer the web service did give us, but that was an error payload instead of the expected output. Those are never raised by the channel itself, \
it hands the payload back inside an ApiResult. They are only raised when the caller asks for it with ApiResult.unwrap().
"""
import logging
from typing import Any, Union

from galaxy.api.errors import (AccessDenied, AuthenticationRequired,  # noqa: F401
                               BackendError, BackendNotAvailable,
                               BackendTimeout, NetworkError, TooManyRequests,
                               UnknownBackendResponse, UnknownError)

from .protocol.messages import ErrorCode, PlayerIOError, PlayerIORegistrationError

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """ The web service rejected the request. error_code is kept as given; error_kind is the enum form of it.
    """
    def __init__(self, error_code: int, message: str, data: Any = None):
        self.error_code = error_code
        self.message = message or ErrorCode.from_value(error_code).name
        self.data = data
        super().__init__(self.message)

    @property
    def error_kind(self) -> ErrorCode:
        return ErrorCode.from_value(self.error_code)

    def __str__(self):
        return f"{self.error_kind.name}: {self.message}"


class RegistrationError(ServiceError):
    def __init__(self, error_code: int, message: str, username_error: str = "", password_error: str = "",
                 email_error: str = "", captcha_error: str = "", data: Any = None):
        super().__init__(error_code, message, data)
        self.username_error = username_error
        self.password_error = password_error
        self.email_error = email_error
        self.captcha_error = captcha_error


def translate_error(error: Union[PlayerIOError, PlayerIORegistrationError]) -> ServiceError:
    """Turn an error payload from the web service into the exception that represents it. The payload itself is attached as data."""
    logger.warning("Error Received: %s (%d)", ErrorCode.from_value(error.error_code).name, error.error_code)
    if isinstance(error, PlayerIORegistrationError):
        return RegistrationError(error.error_code, error.message, error.username_error, error.password_error,
                                 error.email_error, error.captcha_error, data=error)
    return ServiceError(error.error_code, error.message, data=error)
