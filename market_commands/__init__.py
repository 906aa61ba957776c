from .base import Command, retention_rule
from .image_add import ImageAddCommand
from .proposal_post import ProposalPostCommand
from .registry import build_commands
from .template_post import TemplatePostCommand

__all__ = [
    "Command",
    "ImageAddCommand",
    "ProposalPostCommand",
    "TemplatePostCommand",
    "build_commands",
    "retention_rule",
]
