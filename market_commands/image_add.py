"""image add <template|market> <id> <protocol> <data> [featured] [skipResize]"""

import itertools
import logging
from typing import Any, List, Tuple

from content_hasher.factories import image_hash
from market_models.models import ItemImage
from param_validation.rules import ParamRule, boolean_rule, choice_rule, id_rule, string_rule
from market_store.memory import InMemoryDraftRepository, InMemoryVenueRepository

from .base import Command

logger = logging.getLogger(__name__)

PROTOCOLS = ("LOCAL", "SMSG", "IPFS", "URL", "FILE")


class ImageAddCommand(Command):
    """Attach a content-addressed image to a listing template or a market."""

    name = "image.add"

    def __init__(self, drafts: InMemoryDraftRepository, venues: InMemoryVenueRepository) -> None:
        self._drafts = drafts
        self._venues = venues
        self._image_ids = itertools.count(1)

    def rules(self) -> Tuple[ParamRule, ...]:
        return (
            choice_rule("template|market", ("template", "market"), required=True),
            id_rule("id", required=True),
            choice_rule("protocol", PROTOCOLS, required=True),
            string_rule("data", required=True),
            boolean_rule("featured", default=False),
            boolean_rule("skipResize", default=False),
        )

    async def execute(self, params: List[Any]) -> ItemImage:
        target, target_id, protocol, data, featured, skip_resize = params[:6]
        logger.debug(
            "adding %s image to %s %s (skip_resize=%s)", protocol, target, target_id, skip_resize
        )
        image = ItemImage(
            image_id=next(self._image_ids),
            hash=image_hash(data),
            protocol=protocol,
            data=data,
            featured=featured,
        )
        if target == "template":
            await self._drafts.add_image(target_id, image)
        else:
            await self._venues.add_image(target_id, image)
        return image
