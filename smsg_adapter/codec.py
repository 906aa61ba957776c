"""Encode action messages into marketplace envelopes and measure them."""

from typing import Any

from content_hasher.hasher import canonicalize

from .models import MessageSize

PROTOCOL_VERSION = "0.3.0"


def encode(message: Any) -> bytes:
    return canonicalize({"version": PROTOCOL_VERSION, "action": message})


class MessageSizer:
    """Size oracle with separate limits for paid and free messages."""

    def __init__(self, max_paid_size: int, max_free_size: int) -> None:
        self._max_paid_size = max_paid_size
        self._max_free_size = max_free_size

    def message_size(self, message: Any, paid: bool) -> MessageSize:
        max_size = self._max_paid_size if paid else self._max_free_size
        return MessageSize(size=len(encode(message)), max_size=max_size)
