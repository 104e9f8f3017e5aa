from typing import Any, Dict, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event.domain.entity.event_entity import EventEntity


class UpdateEventUseCase:
    """
    Field merge into an existing event.

    Location sub-fields and organizer ownership are not re-checked here;
    only id and organizer_id are protected from the patch.
    """

    def __init__(self, event_command_repo: IEventCommandRepo) -> None:
        self.event_command_repo = event_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
    ) -> Self:
        return cls(event_command_repo=event_command_repo)

    @Logger.io
    async def update(self, *, event_id: str, fields: Dict[str, Any]) -> EventEntity:
        patch = EventEntity.build_patch(fields)

        event = await self.event_command_repo.update_by_id(event_id=event_id, patch=patch)
        if event is None:
            raise NotFoundError(f'Event not found: {event_id}')

        Logger.base.info(f'✏️ [UPDATE_EVENT] Updated {sorted(patch)} on event {event_id}')
        return event
