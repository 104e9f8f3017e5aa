from src.service.event.driven_adapter.model.event_model import EventModel
from src.service.event.driven_adapter.model.session_model import SessionModel
from src.service.event.driven_adapter.model.ticket_model import TicketModel

__all__ = ['EventModel', 'SessionModel', 'TicketModel']
