"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.event.app.command import (
    create_event_use_case,
    update_event_status_use_case,
    update_event_use_case,
    upload_event_image_use_case,
)
from src.service.event.app.query import (
    get_event_detail_use_case,
    list_events_use_case,
    list_my_events_use_case,
)
from src.service.event.driving_adapter.http_controller.auth import organizer_identity


WIRE_MODULES: list[ModuleType] = [
    create_event_use_case,
    update_event_use_case,
    update_event_status_use_case,
    upload_event_image_use_case,
    list_events_use_case,
    list_my_events_use_case,
    get_event_detail_use_case,
    organizer_identity,
]
