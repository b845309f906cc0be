""" A collection of top-level functions that do not belong to any one class.
"""
import hashlib
import hmac
import time


def calc_auth(user_id: str, shared_secret: str) -> str:
    """Calculate an auth value for PlayerIO.connect.

    The result is "<unix time>:<hex hmac-sha1 of '<unix time>:<user_id>' keyed with shared_secret>". The web service recomputes it with the same shared secret \
(the one configured on the connection in the admin panel) and accepts it within its own clock skew window. The format is fixed by the service, do not change it.
    """
    unix_time = int(time.time())  # truncated, not rounded.
    message = f"{unix_time}:{user_id}".encode("utf-8")
    digest = hmac.new(shared_secret.encode("utf-8"), message, hashlib.sha1).hexdigest()
    return f"{unix_time}:{digest}"
