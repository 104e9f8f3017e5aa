"""
Event Query Repository Implementation - CQRS Read Side
"""

from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.event.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event.domain.entity.event_entity import EventEntity
from src.service.event.domain.entity.session_entity import SessionEntity
from src.service.event.domain.entity.ticket_entity import TicketEntity
from src.service.event.driven_adapter.model.event_model import EventModel
from src.service.event.driven_adapter.model.session_model import SessionModel
from src.service.event.driven_adapter.model.ticket_model import TicketModel
from src.service.event.driven_adapter.repo.event_row_mapper import (
    model_to_event,
    model_to_session,
    model_to_ticket,
)


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(EventModel).where(EventModel.id == event_id))
            model = result.scalar_one_or_none()
            return model_to_event(model) if model else None

    @Logger.io
    async def find(
        self, *, event_type: Optional[str] = None, organizer_id: Optional[str] = None
    ) -> List[EventEntity]:
        stmt = select(EventModel)
        if event_type is not None:
            stmt = stmt.where(EventModel.event_type == event_type)
        if organizer_id is not None:
            stmt = stmt.where(EventModel.organizer_id == organizer_id)

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [model_to_event(m) for m in result.scalars().all()]

    @Logger.io
    async def list_sessions(self, *, event_id: str) -> List[SessionEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SessionModel).where(SessionModel.event_id == event_id)
            )
            return [model_to_session(m) for m in result.scalars().all()]

    @Logger.io
    async def list_tickets(self, *, event_id: str) -> List[TicketEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TicketModel).where(TicketModel.event_id == event_id)
            )
            return [model_to_ticket(m) for m in result.scalars().all()]
