from .lifecycle import DraftLifecycle, DraftState, LifecycleTransitionError
from .locks import KeyedLock
from .orchestrator import MessageOrchestrator
from .ports import DraftRepository, MessageSender, SizeOracle
from .routing import MessageRoute, resolve_route

__all__ = [
    "DraftLifecycle",
    "DraftRepository",
    "DraftState",
    "KeyedLock",
    "LifecycleTransitionError",
    "MessageOrchestrator",
    "MessageRoute",
    "MessageSender",
    "SizeOracle",
    "resolve_route",
]
