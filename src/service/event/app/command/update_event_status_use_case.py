from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidStatusError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event.domain.entity.event_entity import EventEntity
from src.service.event.domain.enum.event_status import EventStatus


class UpdateEventStatusUseCase:
    """
    Overwrite an event's status.

    Any status may replace any other (no transition graph). Unknown labels are
    stored as-is unless EVENT_STATUS_STRICT is enabled.
    """

    def __init__(self, event_command_repo: IEventCommandRepo, *, strict: bool = False) -> None:
        self.event_command_repo = event_command_repo
        self.strict = strict

    @classmethod
    @inject
    def depends(
        cls,
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
    ) -> Self:
        return cls(event_command_repo=event_command_repo, strict=settings.EVENT_STATUS_STRICT)

    @Logger.io
    async def update_status(self, *, event_id: str, status: str) -> EventEntity:
        if self.strict and not EventStatus.is_recognized(status):
            raise InvalidStatusError(f'Unrecognized event status: {status}')

        event = await self.event_command_repo.update_by_id(
            event_id=event_id, patch={'status': status}
        )
        if event is None:
            raise NotFoundError(f'Event not found: {event_id}')

        Logger.base.info(f'🔁 [UPDATE_STATUS] Event {event_id} -> {status}')
        return event
