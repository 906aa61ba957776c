"""Freeze drafts and broadcast them as a primary message plus dependents."""

import dataclasses
import logging
from typing import Any, List, Optional, Sequence, Tuple

from content_hasher.factories import (
    build_image_message,
    build_listing_message,
    build_proposal_message,
    listing_hash,
    require_listing_parts,
)
from market_models.errors import InvalidParameterError, MessageTooLargeError
from market_models.models import (
    ListingDraft,
    PaymentAddress,
    ProposalDraft,
    SendParameters,
    SendResult,
    Venue,
)
from wallet_core.provisioner import AddressProvisioner

from .lifecycle import DraftLifecycle, DraftState
from .locks import KeyedLock
from .ports import DraftRepository, MessageSender, SizeOracle
from .routing import resolve_route

logger = logging.getLogger(__name__)


class MessageOrchestrator:
    """Runs the post sequence for listing drafts and proposals.

    Posts of the same draft are serialized, so the address attach, size
    check and hash assignment of one call complete before another call for
    that draft reads it.
    """

    def __init__(
        self,
        drafts: DraftRepository,
        provisioner: AddressProvisioner,
        sender: MessageSender,
        sizer: SizeOracle,
        max_retention_days: int,
        locks: Optional[KeyedLock] = None,
    ) -> None:
        self._drafts = drafts
        self._provisioner = provisioner
        self._sender = sender
        self._sizer = sizer
        self._max_retention_days = max_retention_days
        self._locks = locks or KeyedLock()

    async def finalize_and_post(
        self,
        draft: ListingDraft,
        venue: Venue,
        days_retention: Optional[int] = None,
        estimate_fee: bool = False,
    ) -> SendResult:
        days = self._retention(days_retention)
        route = resolve_route(venue)

        async with self._locks.hold(draft.draft_id):
            draft = await self._drafts.find_one(draft.draft_id)
            require_listing_parts(draft)
            lifecycle = DraftLifecycle.from_draft(draft)

            if draft.payment_address is None:
                scheme = draft.payment_information.escrow_scheme
                if estimate_fee:
                    # sized and priced as posted, but nothing is persisted
                    draft = _with_payment_address(draft, self._provisioner.placeholder(scheme))
                else:
                    address = await self._provisioner.provision(draft.identity.wallet, scheme)
                    draft = await self._drafts.attach_payment_address(draft.draft_id, address)
                    lifecycle.advance(DraftState.PRICED)

            content_hash = draft.hash or listing_hash(draft)
            primary = build_listing_message(dataclasses.replace(draft, hash=content_hash))
            dependents = tuple(build_image_message(image, content_hash) for image in draft.images)
            self._admit(primary, dependents)

            params = SendParameters(
                wallet=draft.identity.wallet,
                from_address=route.from_address,
                to_address=route.to_address,
                paid_message=True,
                days_retention=days,
                estimate_fee=estimate_fee,
            )

            if estimate_fee:
                return await self._estimate(params, primary, dependents)

            if not draft.frozen:
                draft = await self._drafts.update_hash(draft.draft_id, content_hash)
                lifecycle.advance(DraftState.FROZEN)
                logger.info("draft %s frozen with hash %s", draft.draft_id, content_hash)
            else:
                logger.debug("draft %s already frozen, reusing hash", draft.draft_id)

            return await self._post(lifecycle, params, primary, dependents)

    async def post_proposal(
        self,
        proposal: ProposalDraft,
        venue: Venue,
        days_retention: Optional[int] = None,
        estimate_fee: bool = False,
    ) -> SendResult:
        days = self._retention(days_retention)
        route = resolve_route(venue)
        message = build_proposal_message(proposal, venue.receive_address)
        self._admit(message, ())

        params = SendParameters(
            wallet=venue.identity.wallet,
            from_address=route.from_address,
            to_address=route.to_address,
            paid_message=True,
            days_retention=days,
            estimate_fee=estimate_fee,
        )
        if estimate_fee:
            return await self._estimate(params, message, ())

        receipt = await self._sender.send(params, message)
        logger.info("proposal %s posted as %s", message.hash, receipt.msgid)
        return SendResult(primary_message_id=receipt.msgid, estimated_fee=receipt.fee)

    def _retention(self, days_retention: Optional[int]) -> int:
        if days_retention is None:
            return self._max_retention_days
        if days_retention < 1 or days_retention > self._max_retention_days:
            raise InvalidParameterError(
                "daysRetention", f"1..{self._max_retention_days}"
            )
        return days_retention

    def _admit(self, primary: Any, dependents: Sequence[Any]) -> None:
        size = self._sizer.message_size(primary, paid=True)
        if not size.fits:
            raise MessageTooLargeError(size.size, size.max_size)
        for message in dependents:
            size = self._sizer.message_size(message, paid=False)
            if not size.fits:
                raise MessageTooLargeError(size.size, size.max_size)

    async def _estimate(
        self, params: SendParameters, primary: Any, dependents: Sequence[Any]
    ) -> SendResult:
        total = await self._sender.estimate_fee(params, primary)
        free_params = dataclasses.replace(params, paid_message=False)
        for message in dependents:
            total += await self._sender.estimate_fee(free_params, message)
        return SendResult(estimated_fee=total)

    async def _post(
        self,
        lifecycle: DraftLifecycle,
        params: SendParameters,
        primary: Any,
        dependents: Tuple[Any, ...],
    ) -> SendResult:
        lifecycle.advance(DraftState.POSTING)
        try:
            receipt = await self._sender.send(params, primary)
        except Exception:
            lifecycle.advance(DraftState.POST_FAILED)
            raise

        # dependents are free messages
        dependent_params = dataclasses.replace(params, paid_message=False)
        msgids: List[str] = []
        for index, message in enumerate(dependents):
            try:
                dependent_receipt = await self._sender.send(dependent_params, message)
            except Exception:
                logger.warning(
                    "dependent message %d of %s failed", index, primary.hash, exc_info=True
                )
                msgids.append("")
                continue
            msgids.append(dependent_receipt.msgid or "")

        lifecycle.advance(DraftState.POSTED)
        return SendResult(
            primary_message_id=receipt.msgid,
            child_message_ids=tuple(msgids),
            estimated_fee=receipt.fee,
        )


def _with_payment_address(draft: ListingDraft, address: PaymentAddress) -> ListingDraft:
    payment = draft.payment_information
    price = dataclasses.replace(payment.item_price, payment_address=address)
    return dataclasses.replace(
        draft, payment_information=dataclasses.replace(payment, item_price=price)
    )
