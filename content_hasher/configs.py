"""Hashable field selections for each message kind.

Local ids, owner references and timestamps are never listed: they are not
part of a message's identity.
"""

from .hasher import HashableConfig, HashableField

LISTING_ITEM_IMAGES = "item_images"
PROPOSAL_OPTIONS = "options"
PROPOSAL_MARKET = "market"
PROPOSAL_OPTION_PROPOSAL_HASH = "proposal_hash"

LISTING_TEMPLATE_CONFIG = HashableConfig(
    fields=(
        HashableField("item_information.title", "title"),
        HashableField("item_information.short_description", "short_description"),
        HashableField("item_information.long_description", "long_description"),
        HashableField("item_information.category", "category"),
        HashableField("payment_information.sale_type", "sale_type"),
        HashableField("payment_information.escrow_scheme", "escrow_type"),
        HashableField("payment_information.escrow_release_type", "escrow_release_type"),
        HashableField("payment_information.buyer_ratio", "buyer_ratio"),
        HashableField("payment_information.seller_ratio", "seller_ratio"),
        HashableField("payment_information.item_price.currency", "currency"),
        HashableField("payment_information.item_price.base_price", "base_price"),
        HashableField(
            "payment_information.item_price.domestic_shipping_price", "domestic_shipping_price"
        ),
        HashableField(
            "payment_information.item_price.international_shipping_price",
            "international_shipping_price",
        ),
        HashableField("payment_information.item_price.payment_address.address", "payment_address"),
        HashableField(
            "payment_information.item_price.payment_address.address_type", "payment_address_type"
        ),
    )
)

IMAGE_CONFIG = HashableConfig(fields=(HashableField("data", "data"),))

PROPOSAL_CONFIG = HashableConfig(
    fields=(
        HashableField("submitter", "submitter"),
        HashableField("title", "title"),
        HashableField("description", "description"),
        HashableField("category", "category"),
        HashableField("target", "target"),
    )
)

PROPOSAL_OPTION_CONFIG = HashableConfig(
    fields=(
        HashableField("option_id", "option_id"),
        HashableField("description", "description"),
    )
)
