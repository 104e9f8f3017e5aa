"""Event Domain Enums"""

from src.service.event.domain.enum.event_status import EventStatus

__all__ = ['EventStatus']
