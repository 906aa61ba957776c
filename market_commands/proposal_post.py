"""proposal post <marketId> <title> <description> [daysRetention] [estimateFee] <option1> <option2> [...]"""

from typing import Any, List, Sequence, Tuple

from market_models.errors import InvalidParameterError
from market_models.models import ProposalCategory, ProposalDraft, SendResult
from message_orchestrator.orchestrator import MessageOrchestrator
from param_validation.rules import ParamRule, boolean_rule, standard_rule, string_rule
from market_store.memory import InMemoryVenueRepository

from .base import Command, retention_rule

_FIRST_OPTION = 5


class ProposalPostCommand(Command):
    """Post a public vote proposal; options beyond the second are a variadic tail."""

    name = "proposal.post"

    def __init__(
        self,
        venues: InMemoryVenueRepository,
        orchestrator: MessageOrchestrator,
        max_retention_days: int,
    ) -> None:
        self._venues = venues
        self._orchestrator = orchestrator
        self._max_retention_days = max_retention_days

    def rules(self) -> Tuple[ParamRule, ...]:
        return (
            standard_rule("marketId", required=True, lookup=self._venues),
            string_rule("proposalTitle", required=True),
            string_rule("proposalDescription", required=True),
            retention_rule(self._max_retention_days),
            boolean_rule("estimateFee", default=False),
            string_rule("option1", required=True),
            string_rule("option2", required=True),
        )

    async def validate(self, params: Sequence[Any]) -> List[Any]:
        checked = await super().validate(params)
        for position, value in enumerate(checked[_FIRST_OPTION:], start=1):
            if not isinstance(value, str):
                raise InvalidParameterError(f"option{position}", "string")
        return checked

    async def execute(self, params: List[Any]) -> SendResult:
        market_id, title, description, days_retention, estimate_fee = params[:_FIRST_OPTION]
        venue = await self._venues.find_one(market_id)
        proposal = ProposalDraft(
            submitter=venue.identity.address,
            title=title,
            description=description,
            options=tuple(params[_FIRST_OPTION:]),
            category=ProposalCategory.PUBLIC_VOTE,
        )
        return await self._orchestrator.post_proposal(
            proposal, venue, days_retention=days_retention, estimate_fee=estimate_fee
        )
