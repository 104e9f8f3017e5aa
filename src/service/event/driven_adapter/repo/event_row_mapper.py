"""Row <-> entity conversion shared by the command and query repositories."""

from typing import Any, Dict

from src.service.event.domain.entity.event_entity import EventEntity
from src.service.event.domain.entity.session_entity import SessionEntity
from src.service.event.domain.entity.ticket_entity import TicketEntity
from src.service.event.driven_adapter.model.event_model import EventModel
from src.service.event.driven_adapter.model.session_model import SessionModel
from src.service.event.driven_adapter.model.ticket_model import TicketModel


def event_to_row(event: EventEntity) -> Dict[str, Any]:
    return {
        'id': event.id,
        'title': event.title,
        'description': event.description,
        'location': event.location,
        'event_type': event.event_type,
        'image': event.image,
        'status': event.status,
        'organizer_id': event.organizer_id,
    }


def model_to_event(model: EventModel) -> EventEntity:
    return EventEntity(
        id=model.id,
        title=model.title,
        description=model.description,
        location=model.location,
        event_type=model.event_type,
        image=model.image,
        status=model.status,
        organizer_id=model.organizer_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def model_to_session(model: SessionModel) -> SessionEntity:
    return SessionEntity(
        id=model.id,
        event_id=model.event_id,
        name=model.name,
        start_time=model.start_time,
        end_time=model.end_time,
    )


def model_to_ticket(model: TicketModel) -> TicketEntity:
    return TicketEntity(
        id=model.id,
        event_id=model.event_id,
        session_id=model.session_id,
        name=model.name,
        price=model.price,
        quantity=model.quantity,
    )
