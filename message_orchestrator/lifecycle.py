"""Forward-only lifecycle of a draft during one post operation."""

import logging
from enum import Enum
from typing import Dict, Tuple

from market_models.models import ListingDraft

logger = logging.getLogger(__name__)


class DraftState(Enum):
    UNPRICED = "UNPRICED"
    PRICED = "PRICED"
    FROZEN = "FROZEN"
    POSTING = "POSTING"
    POSTED = "POSTED"
    POST_FAILED = "POST_FAILED"


class LifecycleTransitionError(RuntimeError):
    """Raised when a transition would move a draft backward."""


_RANK: Dict[DraftState, int] = {
    DraftState.UNPRICED: 0,
    DraftState.PRICED: 1,
    DraftState.FROZEN: 2,
    DraftState.POSTING: 3,
    DraftState.POSTED: 4,
    DraftState.POST_FAILED: 4,
}

_TERMINAL = (DraftState.POSTED, DraftState.POST_FAILED)


class DraftLifecycle:
    def __init__(self, draft_id: int, state: DraftState) -> None:
        self._draft_id = draft_id
        self._history: Tuple[DraftState, ...] = (state,)

    @classmethod
    def from_draft(cls, draft: ListingDraft) -> "DraftLifecycle":
        if draft.frozen:
            state = DraftState.FROZEN
        elif draft.payment_address is not None:
            state = DraftState.PRICED
        else:
            state = DraftState.UNPRICED
        return cls(draft.draft_id, state)

    @property
    def state(self) -> DraftState:
        return self._history[-1]

    @property
    def history(self) -> Tuple[DraftState, ...]:
        return self._history

    def advance(self, state: DraftState) -> None:
        current = self.state
        if current in _TERMINAL:
            raise LifecycleTransitionError(
                f"Draft {self._draft_id} is already {current.value}."
            )
        if _RANK[state] <= _RANK[current]:
            raise LifecycleTransitionError(
                f"Draft {self._draft_id} cannot move from {current.value} to {state.value}."
            )
        logger.debug("draft %s: %s -> %s", self._draft_id, current.value, state.value)
        self._history = self._history + (state,)
