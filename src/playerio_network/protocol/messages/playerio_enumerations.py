from enum import IntEnum


class ErrorCode(IntEnum):
    """Machine readable error kinds returned by the Player.IO web service.

    Error payloads carry this as a plain int32 so that a code added server-side does not break decoding. Use `ErrorCode.from_value` to get an enum when possible.
    """
    UnsupportedMethod = 0
    GeneralError = 1
    InternalError = 2
    AccessDenied = 3
    InvalidMessageFormat = 4
    MissingValue = 5
    GameRequired = 6
    ExternalError = 7
    ArgumentOutOfRange = 8
    GameDisabled = 9
    UnknownGame = 10
    UnknownConnection = 11
    InvalidAuth = 12
    NoServersAvailable = 13
    RoomDataTooLarge = 14
    RoomAlreadyExists = 15
    UnknownServerType = 16
    UnknownRoom = 17
    MissingRoomId = 18
    RoomIsFull = 19
    NotASearchColumn = 20
    QuickConnectMethodNotEnabled = 21
    UnknownUser = 22
    InvalidPassword = 23
    InvalidRegistrationData = 24
    InvalidBigDBKey = 25
    BigDBObjectTooLarge = 26
    BigDBObjectDoesNotExist = 27
    UnknownTable = 28
    UnknownIndex = 29
    InvalidIndexValue = 30
    NotObjectCreator = 31
    KeyAlreadyUsed = 32
    StaleVersion = 33
    CircularReference = 34
    NotConnected = 40

    @classmethod
    def from_value(cls, value: int) -> "ErrorCode":
        # codes we do not know about are reported as a general error rather than blowing up the caller.
        try:
            return cls(value)
        except ValueError:
            return cls.GeneralError


class ActionCode(IntEnum):
    """ Numeric web service method ids. Sent as the last segment of the request url.
    """
    Connect = 10
    SimpleConnect = 400
    # alias of SimpleConnect. kongregate logins are sent on the same method id.
    KongregateConnect = 400
    SimpleRegister = 403
    SimpleRecoverPassword = 406
    FacebookOAuthConnect = 418
    SteamConnect = 421
