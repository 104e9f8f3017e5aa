from datetime import datetime
from typing import Any, Dict, Optional

import attrs
import uuid_utils

from src.platform.exception.exceptions import UnauthorizedError
from src.service.event.domain.enum.event_status import EventStatus
from src.service.event.domain.value_object.location import Location


# Fields a partial update may touch; id and organizer_id are immutable
PATCHABLE_FIELDS = frozenset(
    {'title', 'description', 'location', 'event_type', 'image', 'status'}
)


def _validate_organizer_id(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not str(value).strip():
        raise UnauthorizedError('Unauthorized')


@attrs.define
class EventEntity:
    title: str
    description: str
    location: Dict[str, Any]
    event_type: str
    organizer_id: str = attrs.field(validator=_validate_organizer_id)
    image: str = ''
    status: str = EventStatus.PENDING.value
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        title: str,
        description: str,
        location: Location,
        event_type: str,
        organizer_id: str,
        image: str = '',
    ) -> 'EventEntity':
        return cls(
            id=str(uuid_utils.uuid7()),
            title=title,
            description=description,
            location=location.to_dict(),
            event_type=event_type,
            organizer_id=organizer_id,
            image=image,
            status=EventStatus.PENDING.value,
        )

    @staticmethod
    def build_patch(fields: Dict[str, Any]) -> Dict[str, Any]:
        """Keep only patchable fields that were actually provided."""
        return {k: v for k, v in fields.items() if k in PATCHABLE_FIELDS and v is not None}
