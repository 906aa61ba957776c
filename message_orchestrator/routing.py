"""Sender and recipient addresses for messages published to a venue."""

from dataclasses import dataclass

from market_models.errors import InvalidParameterError
from market_models.models import Venue, VenueType


@dataclass(frozen=True)
class MessageRoute:
    from_address: str
    to_address: str


def resolve_route(venue: Venue) -> MessageRoute:
    """Messages always flow from the publish address to the receive address.

    MARKETPLACE venues share one key for both sides. STOREFRONT venues
    publish with the public half of the receive key and STOREFRONT_ADMIN
    venues hold two distinct keys, so their addresses may differ.
    """

    if not venue.publish_address or not venue.receive_address:
        raise InvalidParameterError("market", "publish and receive addresses")
    if venue.venue_type == VenueType.MARKETPLACE and venue.publish_address != venue.receive_address:
        raise InvalidParameterError("market", "identical publish and receive addresses")
    return MessageRoute(from_address=venue.publish_address, to_address=venue.receive_address)
