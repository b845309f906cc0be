"""
Unit tests for the auth hash calculator.
"""

import hashlib
import hmac
import re
from unittest.mock import patch

import pytest

from playerio_network import PlayerIO, calc_auth

AUTH_PATTERN = re.compile(r"^\d+:[0-9a-f]{40}$")


@pytest.mark.parametrize(
    "user_id,shared_secret",
    [
        ("alice", "secret"),
        ("", ""),
        ("üser with spaces", "sécret"),
        ("1234567890", "a" * 200),
    ],
)
def test_calc_auth_format(user_id, shared_secret):
    """Output is a decimal timestamp, a colon and 40 lowercase hex characters."""
    assert AUTH_PATTERN.match(calc_auth(user_id, shared_secret))


def test_calc_auth_matches_hmac_sha1():
    """The digest is HMAC-SHA1 of '<time>:<user id>' keyed with the shared secret."""
    with patch("playerio_network.utils.time.time", return_value=1700000000.0):
        result = calc_auth("alice", "secret")

    expected = hmac.new(b"secret", b"1700000000:alice", hashlib.sha1).hexdigest()
    assert result == f"1700000000:{expected}"


def test_calc_auth_truncates_timestamp():
    """Fractional seconds are dropped, never rounded up."""
    with patch("playerio_network.utils.time.time", return_value=1700000000.999):
        result = calc_auth("alice", "secret")

    assert result.startswith("1700000000:")


def test_calc_auth_same_second_is_stable():
    with patch("playerio_network.utils.time.time", side_effect=[1700000000.1, 1700000000.8]):
        first = calc_auth("alice", "secret")
        second = calc_auth("alice", "secret")

    assert first == second


def test_calc_auth_next_second_has_larger_timestamp():
    with patch("playerio_network.utils.time.time", side_effect=[1700000000.5, 1700000001.5]):
        first = calc_auth("alice", "secret")
        second = calc_auth("alice", "secret")

    first_time, first_digest = first.split(":")
    second_time, second_digest = second.split(":")
    assert int(second_time) > int(first_time)
    assert first_digest != second_digest


def test_calc_auth_utf8_secret():
    """Secret and user id are both encoded as UTF-8."""
    with patch("playerio_network.utils.time.time", return_value=42):
        result = calc_auth("ıİ", "ключ")

    expected = hmac.new("ключ".encode("utf-8"), "42:ıİ".encode("utf-8"), hashlib.sha1).hexdigest()
    assert result == f"42:{expected}"


def test_player_io_exposes_calc_auth():
    with patch("playerio_network.utils.time.time", return_value=1700000000):
        assert PlayerIO.calc_auth("alice", "secret") == calc_auth("alice", "secret")
