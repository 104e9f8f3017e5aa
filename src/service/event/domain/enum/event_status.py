"""
Event Status Enum - Domain Value Object

The lifecycle labels the platform recognizes. The lifecycle service stores and
returns the label as-is; it does not enforce a transition graph.
"""

from enum import Enum


class EventStatus(str, Enum):
    DRAFT = 'draft'
    PENDING = 'pending'
    PUBLISHED = 'published'
    CANCELLED = 'cancelled'
    COMPLETED = 'completed'

    @classmethod
    def is_recognized(cls, value: str) -> bool:
        return value in cls._value2member_map_
