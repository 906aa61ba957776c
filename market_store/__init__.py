from .memory import InMemoryDraftRepository, InMemoryVenueRepository

__all__ = ["InMemoryDraftRepository", "InMemoryVenueRepository"]
