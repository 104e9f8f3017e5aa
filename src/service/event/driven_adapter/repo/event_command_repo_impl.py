"""
Event Command Repository Implementation - CQRS Write Side

Each method opens its own session and commits one statement, so every
create/update is atomic at row granularity without a unit of work.
"""

from typing import Any, AsyncContextManager, Callable, Dict, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.event.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event.domain.entity.event_entity import EventEntity
from src.service.event.driven_adapter.model.event_model import EventModel
from src.service.event.driven_adapter.repo.event_row_mapper import event_to_row, model_to_event


class EventCommandRepoImpl(IEventCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, event: EventEntity) -> EventEntity:
        async with self.session_factory() as session:
            result = await session.execute(
                insert(EventModel).values(**event_to_row(event)).returning(EventModel)
            )
            created = result.scalar_one()
            await session.commit()
            return model_to_event(created)

    @Logger.io
    async def update_by_id(
        self, *, event_id: str, patch: Dict[str, Any]
    ) -> Optional[EventEntity]:
        async with self.session_factory() as session:
            if not patch:
                result = await session.execute(select(EventModel).where(EventModel.id == event_id))
                model = result.scalar_one_or_none()
                return model_to_event(model) if model else None

            result = await session.execute(
                update(EventModel)
                .where(EventModel.id == event_id)
                .values(**patch)
                .returning(EventModel)
            )
            model = result.scalar_one_or_none()
            await session.commit()
            return model_to_event(model) if model else None
