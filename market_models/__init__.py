from .errors import (
    EscrowNotImplementedError,
    InvalidParameterError,
    MarketError,
    MessageTooLargeError,
    MissingParameterError,
    ModelNotFoundError,
    ModelNotModifiableError,
    TransientSendError,
)
from .messages import (
    ImageAddMessage,
    ListingItemAddMessage,
    MessageType,
    ProposalAddMessage,
    ProposalOptionMessage,
)
from .models import (
    AddressType,
    Cryptocurrency,
    EscrowReleaseType,
    EscrowScheme,
    Identity,
    ItemImage,
    ItemInformation,
    ItemPrice,
    ListingDraft,
    PaymentAddress,
    PaymentInformation,
    ProposalCategory,
    ProposalDraft,
    SaleType,
    SendParameters,
    SendReceipt,
    SendResult,
    Venue,
    VenueType,
)

__all__ = [
    "AddressType",
    "Cryptocurrency",
    "EscrowNotImplementedError",
    "EscrowReleaseType",
    "EscrowScheme",
    "Identity",
    "ImageAddMessage",
    "InvalidParameterError",
    "ItemImage",
    "ItemInformation",
    "ItemPrice",
    "ListingDraft",
    "ListingItemAddMessage",
    "MarketError",
    "MessageTooLargeError",
    "MessageType",
    "MissingParameterError",
    "ModelNotFoundError",
    "ModelNotModifiableError",
    "PaymentAddress",
    "PaymentInformation",
    "ProposalAddMessage",
    "ProposalCategory",
    "ProposalDraft",
    "ProposalOptionMessage",
    "SaleType",
    "SendParameters",
    "SendReceipt",
    "SendResult",
    "TransientSendError",
    "Venue",
    "VenueType",
]
