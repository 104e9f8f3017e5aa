"""
Create Event Use Case

Flow:
1. Require a resolved organizer identity (fail before any write)
2. Validate the structured location
3. Attach the image, if any (storage write + URL mint)
4. Persist the event with organizer_id taken from the identity, never from input

There is no transaction spanning steps 3 and 4: if the insert fails after a
successful upload, the stored object stays orphaned.
"""

from typing import Any, Dict, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import UnauthorizedError
from src.platform.logging.loguru_io import Logger
from src.service.event.app.command.upload_event_image_use_case import UploadEventImageUseCase
from src.service.event.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event.app.interface.i_object_storage import IObjectStorage
from src.service.event.domain.entity.event_entity import EventEntity
from src.service.event.domain.value_object.location import Location
from src.service.event.domain.value_object.uploaded_image import UploadedImage


class CreateEventUseCase:
    def __init__(
        self,
        event_command_repo: IEventCommandRepo,
        upload_image_use_case: UploadEventImageUseCase,
    ) -> None:
        self.event_command_repo = event_command_repo
        self.upload_image_use_case = upload_image_use_case

    @classmethod
    @inject
    def depends(
        cls,
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
        object_storage: IObjectStorage = Depends(Provide[Container.object_storage]),
    ) -> Self:
        return cls(
            event_command_repo=event_command_repo,
            upload_image_use_case=UploadEventImageUseCase(object_storage=object_storage),
        )

    @Logger.io
    async def create(
        self,
        *,
        organizer_id: Optional[str],
        title: str,
        description: str,
        location: Dict[str, Any],
        event_type: str,
        image: Optional[UploadedImage] = None,
    ) -> EventEntity:
        if not organizer_id:
            raise UnauthorizedError('Unauthorized')

        validated_location = Location.from_dict(location)

        image_url = await self.upload_image_use_case.attach(image=image)

        event = EventEntity.create(
            title=title,
            description=description,
            location=validated_location,
            event_type=event_type,
            organizer_id=organizer_id,
            image=image_url,
        )
        created_event = await self.event_command_repo.create(event=event)

        Logger.base.info(
            f'✅ [CREATE_EVENT] Created event {created_event.id} for organizer {organizer_id}'
        )
        return created_event
