from typing import Tuple

import attrs

from src.service.event.domain.entity.event_entity import EventEntity
from src.service.event.domain.entity.session_entity import SessionEntity
from src.service.event.domain.entity.ticket_entity import TicketEntity


@attrs.frozen
class EventDetail:
    event: EventEntity
    sessions: Tuple[SessionEntity, ...] = ()
    tickets: Tuple[TicketEntity, ...] = ()
