"""Immutable action messages broadcast over the messaging network."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .models import (
    Cryptocurrency,
    EscrowReleaseType,
    EscrowScheme,
    PaymentAddress,
    ProposalCategory,
    SaleType,
)


class MessageType(Enum):
    MPA_LISTING_ADD = "MPA_LISTING_ADD"
    MPA_LISTING_IMAGE_ADD = "MPA_LISTING_IMAGE_ADD"
    MPA_PROPOSAL_ADD = "MPA_PROPOSAL_ADD"


@dataclass(frozen=True)
class ListingItemAddMessage:
    seller: str
    title: str
    short_description: str
    long_description: str
    category: Tuple[str, ...]
    image_hashes: Tuple[str, ...]
    sale_type: SaleType
    escrow_scheme: EscrowScheme
    escrow_release_type: EscrowReleaseType
    buyer_ratio: float
    seller_ratio: float
    currency: Cryptocurrency
    base_price: float
    domestic_shipping_price: float
    international_shipping_price: float
    payment_address: Optional[PaymentAddress]
    hash: Optional[str] = None
    type: MessageType = MessageType.MPA_LISTING_ADD


@dataclass(frozen=True)
class ImageAddMessage:
    """Dependent message carrying one image of a posted listing."""

    target: str
    hash: str
    protocol: str
    data: str
    featured: bool
    type: MessageType = MessageType.MPA_LISTING_IMAGE_ADD


@dataclass(frozen=True)
class ProposalOptionMessage:
    option_id: int
    description: str
    hash: str


@dataclass(frozen=True)
class ProposalAddMessage:
    submitter: str
    title: str
    description: str
    options: Tuple[ProposalOptionMessage, ...]
    category: ProposalCategory
    target: str
    hash: str
    type: MessageType = MessageType.MPA_PROPOSAL_ADD
