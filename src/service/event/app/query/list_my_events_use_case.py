from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import UnauthorizedError
from src.platform.logging.loguru_io import Logger
from src.service.event.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event.domain.entity.event_entity import EventEntity


class ListMyEventsUseCase:
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
    async def list_by_organizer(self, *, organizer_id: Optional[str]) -> List[EventEntity]:
        if not organizer_id:
            raise UnauthorizedError('Unauthorized')

        events = await self.event_query_repo.find(organizer_id=organizer_id)

        Logger.base.info(f'📋 [MY_EVENTS] Found {len(events)} events for organizer {organizer_id}')
        return events
