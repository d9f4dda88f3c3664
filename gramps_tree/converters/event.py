"""
event.py - Conversion of Gramps Web event records.

Module: gramps_tree.converters.event
"""
from __future__ import annotations

__all__ = ['ConvertedEvent', 'convert_event']

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..gramps_date import format_gramps_date
from .lookup import label_of


@dataclass(frozen=True)
class ConvertedEvent:
    handle: str
    gramps_id: str
    type: str = 'Unknown'
    date: Optional[str] = None
    place_handle: Optional[str] = None
    description: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'handle': self.handle,
            'grampsId': self.gramps_id,
            'type': self.type,
            'date': self.date,
            'placeHandle': self.place_handle,
            'description': self.description,
        }


def convert_event(event: Mapping[str, Any], unknown_label: str = 'Unknown') -> ConvertedEvent:
    """Convert a raw Gramps event; the date is formatted, the place stays a handle."""
    event_type = label_of(event.get('type'))
    return ConvertedEvent(
        handle=event.get('handle'),
        gramps_id=event.get('gramps_id'),
        type=event_type if event_type is not None else unknown_label,
        date=format_gramps_date(event.get('date')),
        place_handle=event.get('place') or None,
        description=event.get('description') or '',
    )
