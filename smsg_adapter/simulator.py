"""In-memory messaging network used for local runs and tests."""

import hashlib
import logging
from typing import Any, Callable, List, Optional

from market_models.errors import TransientSendError
from market_models.models import SendParameters, SendReceipt

from .codec import encode
from .models import SentMessage

logger = logging.getLogger(__name__)

_FEE_PER_KB_DAY = 0.00002
_MIN_FEE = 0.0001


class SimulatedSmsgNetwork:
    """Assigns message ids and records every send; never touches a network.

    ``fail_when`` is called with each message before it is sent and turns a
    true result into a :class:`TransientSendError`.
    """

    def __init__(self, fail_when: Optional[Callable[[Any], bool]] = None) -> None:
        self._fail_when = fail_when
        self._sent: List[SentMessage] = []
        self._attempts = 0

    @property
    def sent(self) -> List[SentMessage]:
        return list(self._sent)

    @property
    def attempts(self) -> int:
        return self._attempts

    async def send(self, params: SendParameters, message: Any) -> SendReceipt:
        self._attempts += 1
        payload = encode(message)
        fee = estimate_fee(params, len(payload))
        if params.estimate_fee:
            return SendReceipt(msgid="", fee=fee)
        if self._fail_when is not None and self._fail_when(message):
            raise TransientSendError("simulated network failure")
        msgid = _message_id(payload, self._attempts)
        self._sent.append(SentMessage(msgid=msgid, params=params, payload=payload))
        logger.debug("sent %s (%d bytes) to %s", msgid, len(payload), params.to_address)
        return SendReceipt(msgid=msgid, fee=fee)

    async def estimate_fee(self, params: SendParameters, message: Any) -> float:
        return estimate_fee(params, len(encode(message)))


def estimate_fee(params: SendParameters, size: int) -> float:
    if not params.paid_message:
        return 0.0
    fee = (size / 1024.0) * params.days_retention * _FEE_PER_KB_DAY
    return round(max(fee, _MIN_FEE), 8)


def _message_id(payload: bytes, sequence: int) -> str:
    return hashlib.sha256(payload + sequence.to_bytes(8, "big")).hexdigest()[:56]
