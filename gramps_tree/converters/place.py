"""
place.py - Conversion of Gramps Web place records.

Module: gramps_tree.converters.place
"""
from __future__ import annotations

__all__ = ['ConvertedPlace', 'convert_place', 'parse_coordinate']

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .lookup import label_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConvertedPlace:
    handle: str
    gramps_id: str
    name: str = ''
    lat: Optional[float] = None
    lng: Optional[float] = None
    type: str = 'Unknown'

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lng is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'handle': self.handle,
            'grampsId': self.gramps_id,
            'name': self.name,
            'lat': self.lat,
            'lng': self.lng,
            'type': self.type,
        }


def parse_coordinate(value: Any) -> Optional[float]:
    """
    Parse a Gramps coordinate string.

    Returns:
        float or None for empty, missing, unparsable or non-finite input.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        if not value.strip():
            return None
        try:
            number = float(value.strip())
        except ValueError:
            logger.debug(f"Unparsable coordinate: {value!r}")
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def convert_place(place: Mapping[str, Any], unknown_label: str = 'Unknown') -> ConvertedPlace:
    """
    Convert a raw Gramps place.

    The display name is the place title, falling back to the primary place
    name's value, then to ''.
    """
    name = place.get('name')
    name_value = name.get('value') if isinstance(name, Mapping) else None
    place_type = label_of(place.get('type'))
    return ConvertedPlace(
        handle=place.get('handle'),
        gramps_id=place.get('gramps_id'),
        name=place.get('title') or name_value or '',
        lat=parse_coordinate(place.get('lat')),
        lng=parse_coordinate(place.get('long')),
        type=place_type if place_type is not None else unknown_label,
    )
