"""
Unit tests for service error translation.
"""

from galaxy.api import errors as galaxy_errors

from playerio_network.errors import (BackendTimeout, RegistrationError,
                                     ServiceError, translate_error)
from playerio_network.protocol.messages import (ErrorCode, PlayerIOError,
                                                PlayerIORegistrationError)


def test_translate_general_error():
    payload = PlayerIOError(error_code=ErrorCode.UnknownUser, message="no such user")

    error = translate_error(payload)

    assert type(error) is ServiceError
    assert error.error_code == 22
    assert error.error_kind == ErrorCode.UnknownUser
    assert error.message == "no such user"
    assert error.data is payload
    assert str(error) == "UnknownUser: no such user"


def test_translate_registration_error():
    payload = PlayerIORegistrationError(
        error_code=ErrorCode.InvalidRegistrationData,
        message="invalid",
        email_error="bad address",
        captcha_error="wrong",
    )

    error = translate_error(payload)

    assert isinstance(error, RegistrationError)
    assert error.email_error == "bad address"
    assert error.captcha_error == "wrong"
    assert error.username_error == ""


def test_unknown_code_falls_back_to_general_error():
    error = translate_error(PlayerIOError(error_code=12345))

    assert error.error_kind == ErrorCode.GeneralError
    assert error.message == "GeneralError"


def test_transport_errors_are_galaxy_errors():
    assert BackendTimeout is galaxy_errors.BackendTimeout
