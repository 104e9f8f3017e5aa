"""In-memory doubles for the event ports, exposed as fixtures."""

from datetime import datetime
from typing import Any, Dict, List, Optional

import attrs
import pytest

from src.platform.exception.exceptions import UploadFailureError
from src.service.event.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event.app.interface.i_object_storage import IObjectStorage
from src.service.event.domain.entity.event_entity import EventEntity
from src.service.event.domain.entity.session_entity import SessionEntity
from src.service.event.domain.entity.ticket_entity import TicketEntity


class InMemoryEventStore(IEventCommandRepo, IEventQueryRepo):
    def __init__(self) -> None:
        self.events: Dict[str, EventEntity] = {}
        self.sessions: List[SessionEntity] = []
        self.tickets: List[TicketEntity] = []
        self.write_count = 0

    async def create(self, *, event: EventEntity) -> EventEntity:
        self.write_count += 1
        assert event.id is not None
        stored = attrs.evolve(event, created_at=datetime.now(), updated_at=datetime.now())
        self.events[event.id] = stored
        return stored

    async def update_by_id(
        self, *, event_id: str, patch: Dict[str, Any]
    ) -> Optional[EventEntity]:
        current = self.events.get(event_id)
        if current is None:
            return None
        self.write_count += 1
        updated = attrs.evolve(current, **patch, updated_at=datetime.now())
        self.events[event_id] = updated
        return updated

    async def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        return self.events.get(event_id)

    async def find(
        self, *, event_type: Optional[str] = None, organizer_id: Optional[str] = None
    ) -> List[EventEntity]:
        return [
            e
            for e in self.events.values()
            if (event_type is None or e.event_type == event_type)
            and (organizer_id is None or e.organizer_id == organizer_id)
        ]

    async def list_sessions(self, *, event_id: str) -> List[SessionEntity]:
        return [s for s in self.sessions if s.event_id == event_id]

    async def list_tickets(self, *, event_id: str) -> List[TicketEntity]:
        return [t for t in self.tickets if t.event_id == event_id]


class RecordingObjectStorage(IObjectStorage):
    def __init__(self, *, fail_on: Optional[str] = None, url_base: str = 'https://cdn.test') -> None:
        self.fail_on = fail_on
        self.url_base = url_base
        self.stored: List[Dict[str, Any]] = []
        self.minted: List[Dict[str, Any]] = []

    async def store(
        self, *, path: str, data: bytes, content_type: str, public_read: bool = True
    ) -> None:
        if self.fail_on == 'store':
            raise UploadFailureError('bucket unavailable')
        self.stored.append(
            {'path': path, 'data': data, 'content_type': content_type, 'public_read': public_read}
        )

    async def mint_public_url(self, *, path: str, expires_at: datetime) -> str:
        if self.fail_on == 'mint':
            raise RuntimeError('signer exploded')
        self.minted.append({'path': path, 'expires_at': expires_at})
        return f'{self.url_base}/{path}'


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def object_storage() -> RecordingObjectStorage:
    return RecordingObjectStorage()


@pytest.fixture
def failing_store_storage() -> RecordingObjectStorage:
    return RecordingObjectStorage(fail_on='store')


@pytest.fixture
def failing_mint_storage() -> RecordingObjectStorage:
    return RecordingObjectStorage(fail_on='mint')


@pytest.fixture
def valid_location() -> Dict[str, str]:
    return {
        'house_number': '12',
        'ward': 'Minh An',
        'district': 'Hoi An',
        'province': 'Quang Nam',
    }
