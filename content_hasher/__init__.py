from .factories import (
    build_image_message,
    build_listing_message,
    build_proposal_message,
    image_hash,
    listing_hash,
    option_hash,
    require_listing_parts,
    verify_proposal_options,
)
from .hasher import (
    FieldOverride,
    HashableConfig,
    HashableField,
    canonical_fields,
    canonicalize,
    hash_fields,
    hash_object,
)

__all__ = [
    "FieldOverride",
    "HashableConfig",
    "HashableField",
    "build_image_message",
    "build_listing_message",
    "build_proposal_message",
    "canonical_fields",
    "canonicalize",
    "hash_fields",
    "hash_object",
    "image_hash",
    "listing_hash",
    "option_hash",
    "require_listing_parts",
    "verify_proposal_options",
]
