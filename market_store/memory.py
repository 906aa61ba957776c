"""In-memory persistence for drafts and venues.

Drafts are stored as immutable snapshots. Every edit replaces the snapshot
and is refused once the draft carries a hash.
"""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Dict, Optional, Tuple

from market_models.errors import ModelNotFoundError, ModelNotModifiableError
from market_models.models import ItemImage, ListingDraft, PaymentAddress, Venue

_TEMPLATE = "ListingItemTemplate"
_MARKET = "Market"


class InMemoryDraftRepository:
    def __init__(self, time_provider: Optional[Callable[[], str]] = None) -> None:
        self._time_provider = time_provider or _utc_timestamp
        self._drafts: Dict[int, ListingDraft] = {}
        self.hash_updates = 0
        self.address_updates = 0

    def add(self, draft: ListingDraft) -> ListingDraft:
        existing = self._drafts.get(draft.draft_id)
        if existing is not None and existing.frozen:
            raise ModelNotModifiableError(_TEMPLATE)
        now = self._time_provider()
        stored = replace(draft, created_at=draft.created_at or now, updated_at=now)
        self._drafts[draft.draft_id] = stored
        return stored

    def list_drafts(self) -> Tuple[ListingDraft, ...]:
        return tuple(self._drafts[key] for key in sorted(self._drafts))

    async def find_one(self, draft_id: int) -> ListingDraft:
        try:
            return self._drafts[draft_id]
        except KeyError:
            raise ModelNotFoundError(_TEMPLATE) from None

    async def attach_payment_address(
        self, draft_id: int, address: PaymentAddress
    ) -> ListingDraft:
        draft = self._editable(await self.find_one(draft_id))
        payment = draft.payment_information
        if payment is None:
            raise ModelNotFoundError("PaymentInformation")
        if payment.item_price is None:
            raise ModelNotFoundError("ItemPrice")
        price = replace(payment.item_price, payment_address=address)
        updated = replace(draft, payment_information=replace(payment, item_price=price))
        self.address_updates += 1
        return self._touch(updated)

    async def update_hash(self, draft_id: int, hash: str) -> ListingDraft:
        draft = self._editable(await self.find_one(draft_id))
        self.hash_updates += 1
        return self._touch(replace(draft, hash=hash))

    async def add_image(self, draft_id: int, image: ItemImage) -> ListingDraft:
        draft = self._editable(await self.find_one(draft_id))
        info = draft.item_information
        if info is None:
            raise ModelNotFoundError("ItemInformation")
        updated = replace(draft, item_information=replace(info, images=info.images + (image,)))
        return self._touch(updated)

    def _editable(self, draft: ListingDraft) -> ListingDraft:
        if draft.frozen:
            raise ModelNotModifiableError(_TEMPLATE)
        return draft

    def _touch(self, draft: ListingDraft) -> ListingDraft:
        stored = replace(draft, updated_at=self._time_provider())
        self._drafts[draft.draft_id] = stored
        return stored


class InMemoryVenueRepository:
    def __init__(self) -> None:
        self._venues: Dict[int, Venue] = {}

    def add(self, venue: Venue) -> Venue:
        self._venues[venue.venue_id] = venue
        return venue

    async def find_one(self, venue_id: int) -> Venue:
        try:
            return self._venues[venue_id]
        except KeyError:
            raise ModelNotFoundError(_MARKET) from None

    async def add_image(self, venue_id: int, image: ItemImage) -> Venue:
        venue = await self.find_one(venue_id)
        updated = replace(venue, images=venue.images + (image,))
        self._venues[venue_id] = updated
        return updated


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()
