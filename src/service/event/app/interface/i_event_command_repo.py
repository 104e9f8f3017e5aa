"""
Event Command Repository Interface - CQRS Write Side

Every method is one atomic write; there is no cross-call transaction.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from src.service.event.domain.entity.event_entity import EventEntity


class IEventCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, event: EventEntity) -> EventEntity:
        """Insert a new event and return the stored row."""
        pass

    @abstractmethod
    async def update_by_id(
        self, *, event_id: str, patch: Dict[str, Any]
    ) -> Optional[EventEntity]:
        """Merge `patch` into the stored event. Returns None if the id does not resolve."""
        pass
