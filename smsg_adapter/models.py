"""Models for encoded messages and their size admission."""

from dataclasses import dataclass

from market_models.models import SendParameters


@dataclass(frozen=True)
class MessageSize:
    size: int
    max_size: int

    @property
    def fits(self) -> bool:
        return self.size <= self.max_size


@dataclass(frozen=True)
class SentMessage:
    msgid: str
    params: SendParameters
    payload: bytes
