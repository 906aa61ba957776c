"""Wiring of commands to their collaborators."""

from typing import Dict

from message_orchestrator.orchestrator import MessageOrchestrator
from market_store.memory import InMemoryDraftRepository, InMemoryVenueRepository

from .base import Command
from .image_add import ImageAddCommand
from .proposal_post import ProposalPostCommand
from .template_post import TemplatePostCommand


def build_commands(
    drafts: InMemoryDraftRepository,
    venues: InMemoryVenueRepository,
    orchestrator: MessageOrchestrator,
    max_retention_days: int,
) -> Dict[str, Command]:
    commands = (
        TemplatePostCommand(drafts, venues, orchestrator, max_retention_days),
        ProposalPostCommand(venues, orchestrator, max_retention_days),
        ImageAddCommand(drafts, venues),
    )
    return {command.name: command for command in commands}
