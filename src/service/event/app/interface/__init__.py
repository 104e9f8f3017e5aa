"""Event Service Interfaces"""

from src.service.event.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event.app.interface.i_object_storage import IObjectStorage

__all__ = ['IEventCommandRepo', 'IEventQueryRepo', 'IObjectStorage']
