from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event.app.dto.event_detail import EventDetail
from src.service.event.app.interface.i_event_query_repo import IEventQueryRepo


class GetEventDetailUseCase:
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
    async def get_detail(self, *, event_id: str) -> EventDetail:
        """Event plus its sessions and tickets. Missing relations are empty, not an error."""
        event = await self.event_query_repo.get_by_id(event_id=event_id)
        if event is None:
            raise NotFoundError('Event not found')

        sessions = await self.event_query_repo.list_sessions(event_id=event_id)
        tickets = await self.event_query_repo.list_tickets(event_id=event_id)

        Logger.base.info(
            f'🎫 [GET_EVENT] Event {event_id} with {len(sessions)} sessions, {len(tickets)} tickets'
        )
        return EventDetail(event=event, sessions=tuple(sessions), tickets=tuple(tickets))
