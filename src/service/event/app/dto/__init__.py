from src.service.event.app.dto.event_detail import EventDetail

__all__ = ['EventDetail']
