"""protocol directory

Everything needed to talk to the Player.IO web api: the message definitions (messages/), the http channel that posts them and reads the response envelope, \
and the helpers that wrap a response into an ApiResult.

Messages are betterproto dataclasses. We only define the ones the connect flow uses.
"""
