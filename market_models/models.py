"""Domain models for drafts, venues and their posting parameters."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class EscrowScheme(Enum):
    MULTISIG = "MULTISIG"
    CONFIDENTIAL = "MAD_CT"
    MAD = "MAD"
    FE = "FE"


class EscrowReleaseType(Enum):
    ANON = "ANON"
    BLIND = "BLIND"


class SaleType(Enum):
    SALE = "SALE"


class Cryptocurrency(Enum):
    PART = "PART"


class AddressType(Enum):
    NORMAL = "NORMAL"
    STEALTH = "STEALTH"


class VenueType(Enum):
    MARKETPLACE = "MARKETPLACE"
    STOREFRONT = "STOREFRONT"
    STOREFRONT_ADMIN = "STOREFRONT_ADMIN"


class ProposalCategory(Enum):
    PUBLIC_VOTE = "PUBLIC_VOTE"
    ITEM_VOTE = "ITEM_VOTE"
    MARKET_VOTE = "MARKET_VOTE"


@dataclass(frozen=True)
class PaymentAddress:
    address: str
    address_type: AddressType


@dataclass(frozen=True)
class Identity:
    """Wallet-backed identity that owns drafts and venues."""

    identity_id: int
    wallet: str
    address: str


@dataclass(frozen=True)
class ItemImage:
    image_id: int
    hash: str
    protocol: str
    data: str
    featured: bool = False


@dataclass(frozen=True)
class Venue:
    venue_id: int
    name: str
    venue_type: VenueType
    receive_address: str
    publish_address: str
    identity: Identity
    images: Tuple[ItemImage, ...] = ()


@dataclass(frozen=True)
class ItemPrice:
    currency: Cryptocurrency
    base_price: float
    domestic_shipping_price: float = 0.0
    international_shipping_price: float = 0.0
    payment_address: Optional[PaymentAddress] = None


@dataclass(frozen=True)
class PaymentInformation:
    sale_type: SaleType
    escrow_scheme: EscrowScheme
    escrow_release_type: EscrowReleaseType = EscrowReleaseType.ANON
    buyer_ratio: float = 100.0
    seller_ratio: float = 100.0
    item_price: Optional[ItemPrice] = None


@dataclass(frozen=True)
class ItemInformation:
    title: str
    short_description: str
    long_description: str
    category: Tuple[str, ...] = ()
    images: Tuple[ItemImage, ...] = ()


@dataclass(frozen=True)
class ListingDraft:
    """Snapshot of a listing template.

    Drafts are edited by replacing snapshots in the store. Once ``hash`` is
    set the store refuses every edit to the hashable fields.
    """

    draft_id: int
    profile_id: int
    identity: Identity
    item_information: Optional[ItemInformation] = None
    payment_information: Optional[PaymentInformation] = None
    hash: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""

    @property
    def frozen(self) -> bool:
        return bool(self.hash)

    @property
    def payment_address(self) -> Optional[PaymentAddress]:
        if self.payment_information is None or self.payment_information.item_price is None:
            return None
        return self.payment_information.item_price.payment_address

    @property
    def images(self) -> Tuple[ItemImage, ...]:
        if self.item_information is None:
            return ()
        return self.item_information.images


@dataclass(frozen=True)
class ProposalDraft:
    submitter: str
    title: str
    description: str
    options: Tuple[str, ...]
    category: ProposalCategory = ProposalCategory.PUBLIC_VOTE
    target: Optional[str] = None


@dataclass(frozen=True)
class SendParameters:
    wallet: str
    from_address: str
    to_address: str
    paid_message: bool = True
    days_retention: int = 2
    estimate_fee: bool = False


@dataclass(frozen=True)
class SendReceipt:
    """What the network capability reports for one message."""

    msgid: str
    fee: Optional[float] = None


@dataclass(frozen=True)
class SendResult:
    primary_message_id: Optional[str] = None
    child_message_ids: Tuple[str, ...] = field(default_factory=tuple)
    estimated_fee: Optional[float] = None

    @property
    def failed_children(self) -> int:
        return sum(1 for msgid in self.child_message_ids if not msgid)
