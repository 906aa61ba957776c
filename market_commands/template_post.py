"""template post <listingItemTemplateId> [daysRetention] <marketId> [estimateFee]"""

from typing import Any, List, Tuple

from market_models.models import SendResult
from message_orchestrator.orchestrator import MessageOrchestrator
from param_validation.rules import ParamRule, boolean_rule, standard_rule
from market_store.memory import InMemoryDraftRepository, InMemoryVenueRepository

from .base import Command, retention_rule


class TemplatePostCommand(Command):
    """Post a listing template to a market, then its images."""

    name = "template.post"

    def __init__(
        self,
        drafts: InMemoryDraftRepository,
        venues: InMemoryVenueRepository,
        orchestrator: MessageOrchestrator,
        max_retention_days: int,
    ) -> None:
        self._drafts = drafts
        self._venues = venues
        self._orchestrator = orchestrator
        self._max_retention_days = max_retention_days

    def rules(self) -> Tuple[ParamRule, ...]:
        return (
            standard_rule("listingItemTemplateId", required=True, lookup=self._drafts),
            retention_rule(self._max_retention_days),
            standard_rule("marketId", required=True, lookup=self._venues),
            boolean_rule("estimateFee", default=False),
        )

    async def execute(self, params: List[Any]) -> SendResult:
        template_id, days_retention, market_id, estimate_fee = params[:4]
        draft = await self._drafts.find_one(template_id)
        venue = await self._venues.find_one(market_id)
        return await self._orchestrator.finalize_and_post(
            draft, venue, days_retention=days_retention, estimate_fee=estimate_fee
        )
