from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.event.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event.domain.entity.event_entity import EventEntity


class ListEventsUseCase:
    def __init__(self, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo)

    @Logger.io
    async def list_events(self, *, event_type: Optional[str] = None) -> List[EventEntity]:
        """All events, optionally narrowed to one event_type. Storage-native order."""
        events = await self.event_query_repo.find(event_type=event_type or None)

        Logger.base.info(f'📋 [LIST_EVENTS] Found {len(events)} events (event_type={event_type})')
        return events
