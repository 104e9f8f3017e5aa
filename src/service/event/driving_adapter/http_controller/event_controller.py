from typing import List, Optional

import attrs
from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from src.platform.logging.loguru_io import Logger
from src.service.event.app.command.create_event_use_case import CreateEventUseCase
from src.service.event.app.command.update_event_status_use_case import UpdateEventStatusUseCase
from src.service.event.app.command.update_event_use_case import UpdateEventUseCase
from src.service.event.app.command.upload_event_image_use_case import UploadEventImageUseCase
from src.service.event.app.query.get_event_detail_use_case import GetEventDetailUseCase
from src.service.event.app.query.list_events_use_case import ListEventsUseCase
from src.service.event.app.query.list_my_events_use_case import ListMyEventsUseCase
from src.service.event.domain.entity.event_entity import EventEntity
from src.service.event.domain.value_object.uploaded_image import UploadedImage
from src.service.event.driving_adapter.http_controller.auth.organizer_identity import (
    require_organizer_id,
)
from src.service.event.driving_adapter.schema.event_schema import (
    CreateEventResponse,
    EventDetailResponse,
    EventResponse,
    EventStatusUpdateRequest,
    EventUpdateRequest,
    MyEventsResponse,
    UploadImageResponse,
)


router = APIRouter()


async def read_uploaded_image(upload: Optional[UploadFile]) -> Optional[UploadedImage]:
    if upload is None:
        return None
    content = await upload.read()
    return UploadedImage(
        content=content,
        content_type=upload.content_type or '',
        filename=upload.filename or 'upload',
    )


def to_event_response(event: EventEntity) -> EventResponse:
    return EventResponse(**attrs.asdict(event))


@router.post('/create', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    title: str = Form(...),
    description: str = Form(...),
    house_number: str = Form('', alias='location[house_number]'),
    ward: str = Form('', alias='location[ward]'),
    district: str = Form('', alias='location[district]'),
    province: str = Form('', alias='location[province]'),
    event_type: str = Form(...),
    image: Optional[UploadFile] = File(None),
    organizer_id: str = Depends(require_organizer_id),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> CreateEventResponse:
    event = await use_case.create(
        organizer_id=organizer_id,
        title=title,
        description=description,
        location={
            'house_number': house_number,
            'ward': ward,
            'district': district,
            'province': province,
        },
        event_type=event_type,
        image=await read_uploaded_image(image),
    )

    return CreateEventResponse(
        message='Event created successfully', event=to_event_response(event)
    )


@router.get('/list', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events(
    event_type: Optional[str] = None,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    events = await use_case.list_events(event_type=event_type)
    return [to_event_response(event) for event in events]


@router.get('/my-events', status_code=status.HTTP_200_OK)
@Logger.io
async def list_my_events(
    organizer_id: str = Depends(require_organizer_id),
    use_case: ListMyEventsUseCase = Depends(ListMyEventsUseCase.depends),
) -> MyEventsResponse:
    events = await use_case.list_by_organizer(organizer_id=organizer_id)
    return MyEventsResponse(events=[to_event_response(event) for event in events])


@router.post('/upload-image', status_code=status.HTTP_200_OK)
@Logger.io
async def upload_image(
    image: Optional[UploadFile] = File(None),
    organizer_id: str = Depends(require_organizer_id),
    use_case: UploadEventImageUseCase = Depends(UploadEventImageUseCase.depends),
) -> UploadImageResponse:
    url = await use_case.upload(organizer_id=organizer_id, image=await read_uploaded_image(image))
    return UploadImageResponse(url=url)


@router.get('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_event_detail(
    event_id: str,
    use_case: GetEventDetailUseCase = Depends(GetEventDetailUseCase.depends),
) -> EventDetailResponse:
    detail = await use_case.get_detail(event_id=event_id)

    return EventDetailResponse(
        **attrs.asdict(detail.event),
        sessions=[attrs.asdict(session) for session in detail.sessions],
        tickets=[attrs.asdict(ticket) for ticket in detail.tickets],
    )


@router.put('/{event_id}/status', status_code=status.HTTP_200_OK)
@Logger.io
async def update_event_status(
    event_id: str,
    request: EventStatusUpdateRequest,
    _organizer_id: str = Depends(require_organizer_id),
    use_case: UpdateEventStatusUseCase = Depends(UpdateEventStatusUseCase.depends),
) -> EventResponse:
    event = await use_case.update_status(event_id=event_id, status=request.status)
    return to_event_response(event)


@router.put('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_event(
    event_id: str,
    request: EventUpdateRequest,
    _organizer_id: str = Depends(require_organizer_id),
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> EventResponse:
    event = await use_case.update(event_id=event_id, fields=request.model_dump(exclude_unset=True))
    return to_event_response(event)
