"""
Event Query Repository Interface - CQRS Read Side
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.event.domain.entity.event_entity import EventEntity
from src.service.event.domain.entity.session_entity import SessionEntity
from src.service.event.domain.entity.ticket_entity import TicketEntity


class IEventQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def find(
        self, *, event_type: Optional[str] = None, organizer_id: Optional[str] = None
    ) -> List[EventEntity]:
        """Equality filter on the given fields; no filter returns every event."""
        pass

    @abstractmethod
    async def list_sessions(self, *, event_id: str) -> List[SessionEntity]:
        pass

    @abstractmethod
    async def list_tickets(self, *, event_id: str) -> List[TicketEntity]:
        pass
