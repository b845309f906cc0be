from typing import (Callable, Dict, Generic, Iterable, List, Mapping, Optional,
                    TypeVar, Union)

import betterproto

from ..errors import translate_error
from .messages import KeyValuePair


def to_key_value_pairs(data: Optional[Mapping[str, str]]) -> List[KeyValuePair]:
    """Convert a str -> str mapping into the repeated KeyValuePair records the service expects. None converts to an empty list."""
    if not data:
        return []
    return [KeyValuePair(key=key, value=value) for key, value in data.items()]


def from_key_value_pairs(records: Optional[Iterable[KeyValuePair]]) -> Dict[str, str]:
    if records is None:
        return {}
    return {record.key: record.value for record in records}


T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=betterproto.Message)
class ApiResult(Generic[T, E]):  # noqa: E302
    """ Outcome of a single request to the web service. Either the expected output (body) or the error payload (error), never both.

    player_token is the token the service sent back in the response header, if it sent one. It is unrelated to the success or failure of the call.
    """
    def __init__(self, body: Optional[T] = None, error: Optional[E] = None, player_token: Optional[str] = None) -> None:
        if (body is None) == (error is None):
            raise ValueError("ApiResult needs exactly one of body or error")
        self._body: Optional[T] = body
        self._error: Optional[E] = error
        self._player_token = player_token

    @property
    def body(self) -> Optional[T]:
        return self._body

    @property
    def error(self) -> Optional[E]:
        return self._error

    @property
    def player_token(self) -> Optional[str]:
        return self._player_token

    @property
    def is_success(self) -> bool:
        return self._error is None

    def map(self, func: Callable[[T], U]) -> "ApiResult[U, E]":
        """Build a new result from the body. An error result is passed through untouched and func is not called."""
        if self._error is not None:
            return ApiResult(error=self._error, player_token=self._player_token)
        return ApiResult(body=func(self._body), player_token=self._player_token)

    def unwrap(self) -> T:
        if self._error is not None:
            raise translate_error(self._error)
        return self._body

    def __repr__(self):
        outcome: Union[T, E, None] = self._body if self.is_success else self._error
        return f"ApiResult({'success' if self.is_success else 'error'}: {outcome!r})"


def message_name(message: Union[betterproto.Message, type]) -> str:
    cls = message if isinstance(message, type) else type(message)
    return cls.__name__
