"""Builders that turn validated drafts into hashed action messages."""

from typing import Dict, List, Optional, Tuple

from market_models.errors import MissingParameterError, ModelNotFoundError
from market_models.messages import (
    ImageAddMessage,
    ListingItemAddMessage,
    ProposalAddMessage,
    ProposalOptionMessage,
)
from market_models.models import (
    ItemImage,
    ItemInformation,
    ItemPrice,
    ListingDraft,
    PaymentInformation,
    ProposalDraft,
)

from .configs import (
    IMAGE_CONFIG,
    LISTING_ITEM_IMAGES,
    LISTING_TEMPLATE_CONFIG,
    PROPOSAL_CONFIG,
    PROPOSAL_MARKET,
    PROPOSAL_OPTION_CONFIG,
    PROPOSAL_OPTION_PROPOSAL_HASH,
    PROPOSAL_OPTIONS,
)
from .hasher import canonical_fields, hash_fields, hash_object


def require_listing_parts(
    draft: ListingDraft,
) -> Tuple[ItemInformation, PaymentInformation, ItemPrice]:
    """Return the sub-entities a listing cannot be posted without."""

    if draft.payment_information is None:
        raise ModelNotFoundError("PaymentInformation")
    if draft.payment_information.item_price is None:
        raise ModelNotFoundError("ItemPrice")
    if draft.item_information is None or not draft.item_information.category:
        raise ModelNotFoundError("ItemCategory")
    return draft.item_information, draft.payment_information, draft.payment_information.item_price


def image_hash(data: str) -> str:
    return hash_object({"data": data}, IMAGE_CONFIG)


def listing_hash(draft: ListingDraft) -> str:
    images = ":".join(image.hash for image in draft.images)
    config = LISTING_TEMPLATE_CONFIG.with_overrides((LISTING_ITEM_IMAGES, images))
    return hash_object(draft, config)


def build_listing_message(draft: ListingDraft) -> ListingItemAddMessage:
    info, payment, price = require_listing_parts(draft)
    return ListingItemAddMessage(
        seller=draft.identity.address,
        title=info.title,
        short_description=info.short_description,
        long_description=info.long_description,
        category=info.category,
        image_hashes=tuple(image.hash for image in info.images),
        sale_type=payment.sale_type,
        escrow_scheme=payment.escrow_scheme,
        escrow_release_type=payment.escrow_release_type,
        buyer_ratio=payment.buyer_ratio,
        seller_ratio=payment.seller_ratio,
        currency=price.currency,
        base_price=price.base_price,
        domestic_shipping_price=price.domestic_shipping_price,
        international_shipping_price=price.international_shipping_price,
        payment_address=price.payment_address,
        hash=draft.hash,
    )


def build_image_message(image: ItemImage, target: str) -> ImageAddMessage:
    return ImageAddMessage(
        target=target,
        hash=image.hash,
        protocol=image.protocol,
        data=image.data,
        featured=image.featured,
    )


def build_proposal_message(draft: ProposalDraft, market: str) -> ProposalAddMessage:
    """Build a ProposalAdd message whose options are chained to its hash.

    The proposal hash covers the flattened option list and the receiving
    market address. Each option hash covers the option and the proposal
    hash.
    """

    if not draft.category:
        raise MissingParameterError("category")

    options = _options_list(draft.options)
    hashable_options = "".join(f"{option_id}:{description}:" for option_id, description in options)

    proposal_fields = canonical_fields(
        {
            "submitter": draft.submitter,
            "title": draft.title,
            "description": draft.description,
            "category": draft.category,
            "target": draft.target or "",
        },
        PROPOSAL_CONFIG,
    )
    proposal_hash = hash_fields(
        proposal_fields,
        ((PROPOSAL_OPTIONS, hashable_options), (PROPOSAL_MARKET, market)),
    )

    option_messages = tuple(
        ProposalOptionMessage(
            option_id=option_id,
            description=description,
            hash=option_hash(option_id, description, proposal_hash),
        )
        for option_id, description in options
    )

    return ProposalAddMessage(
        submitter=draft.submitter,
        title=draft.title,
        description=draft.description,
        options=option_messages,
        category=draft.category,
        target=draft.target or "",
        hash=proposal_hash,
    )


def option_hash(option_id: int, description: str, proposal_hash: str) -> str:
    option_fields: Dict[str, object] = canonical_fields(
        {"option_id": option_id, "description": description}, PROPOSAL_OPTION_CONFIG
    )
    return hash_fields(option_fields, ((PROPOSAL_OPTION_PROPOSAL_HASH, proposal_hash),))


def verify_proposal_options(message: ProposalAddMessage, proposal_hash: Optional[str] = None) -> bool:
    """True when every option hash was derived from ``proposal_hash``."""

    parent = proposal_hash or message.hash
    return all(
        option.hash == option_hash(option.option_id, option.description, parent)
        for option in message.options
    )


def _options_list(descriptions: Tuple[str, ...]) -> List[Tuple[int, str]]:
    return [(option_id, description) for option_id, description in enumerate(descriptions)]
