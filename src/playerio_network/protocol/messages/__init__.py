from .playerio_enumerations import ActionCode, ErrorCode
from .playerio_messages import (ConnectArgs, ConnectOutput,
                                FacebookOAuthConnectArgs,
                                KeyValuePair, KongregateConnectArgs,
                                NoArgsOrOutput, PlayerIOError,
                                PlayerIORegistrationError,
                                SimpleConnectArgs, SimpleRecoverPasswordArgs,
                                SimpleRegisterArgs, SteamConnectArgs)
