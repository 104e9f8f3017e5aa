from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class LocationSchema(BaseModel):
    house_number: str
    ward: str
    district: str
    province: str


class EventUpdateRequest(BaseModel):
    """Partial update: omitted fields are left untouched."""

    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[Dict[str, Any]] = None
    event_type: Optional[str] = None
    image: Optional[str] = None
    status: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'title': 'Hoi An Lantern Night (rescheduled)',
                'location': {
                    'house_number': '12',
                    'ward': 'Minh An',
                    'district': 'Hoi An',
                    'province': 'Quang Nam',
                },
            }
        }


class EventStatusUpdateRequest(BaseModel):
    status: str

    class Config:
        json_schema_extra = {'example': {'status': 'published'}}


class EventResponse(BaseModel):
    id: str
    title: str
    description: str
    location: Dict[str, Any]
    event_type: str
    image: str
    status: str
    organizer_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        json_schema_extra = {
            'example': {
                'id': '0192f3a4-7c1e-7b4a-9d2e-5f6a7b8c9d0e',
                'title': 'Hoi An Lantern Night',
                'description': 'Full moon lantern festival by the river',
                'location': {
                    'house_number': '12',
                    'ward': 'Minh An',
                    'district': 'Hoi An',
                    'province': 'Quang Nam',
                },
                'event_type': 'festival',
                'image': 'https://bucket.s3.amazonaws.com/event/1714000000000-lantern.png',
                'status': 'pending',
                'organizer_id': 'org-42',
            }
        }


class SessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    event_id: str
    name: str
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


class TicketResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    event_id: str
    session_id: Optional[str] = None
    name: str
    price: int
    quantity: int


class EventDetailResponse(EventResponse):
    sessions: List[SessionResponse]
    tickets: List[TicketResponse]


class CreateEventResponse(BaseModel):
    message: str
    event: EventResponse


class MyEventsResponse(BaseModel):
    events: List[EventResponse]


class UploadImageResponse(BaseModel):
    url: str
