"""Capabilities the orchestrator consumes from persistence and the network."""

from typing import Any, Protocol

from market_models.models import ListingDraft, PaymentAddress, SendParameters, SendReceipt
from smsg_adapter.models import MessageSize


class DraftRepository(Protocol):
    async def find_one(self, draft_id: int) -> ListingDraft:
        ...

    async def attach_payment_address(
        self, draft_id: int, address: PaymentAddress
    ) -> ListingDraft:
        ...

    async def update_hash(self, draft_id: int, hash: str) -> ListingDraft:
        ...


class MessageSender(Protocol):
    async def send(self, params: SendParameters, message: Any) -> SendReceipt:
        ...

    async def estimate_fee(self, params: SendParameters, message: Any) -> float:
        ...


class SizeOracle(Protocol):
    def message_size(self, message: Any, paid: bool) -> MessageSize:
        ...
