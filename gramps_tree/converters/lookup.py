"""
lookup.py - Handle indexes and reference helpers shared by the converters.

Gramps records point at each other by handle. These helpers build
handle -> record indexes and follow event references. Out-of-range and
dangling references resolve to None; a missing event_ref_list is a
ConversionError.

Module: gramps_tree.converters.lookup
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from ..errors import ConversionError

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]


def label_of(value: Any) -> Optional[str]:
    """
    Return the display label of a Gramps typed value.

    Typed values arrive as {"_class": "EventType", "string": "Birth"}; some
    server versions send the bare string instead.
    """
    if isinstance(value, Mapping):
        label = value.get('string')
        return label if isinstance(label, str) else None
    if isinstance(value, str):
        return value
    return None


def build_index(records: Iterable[Record]) -> Dict[str, Record]:
    """
    Index records by handle. Later duplicates overwrite earlier ones.

    Records without a string handle cannot be referenced and are left out.
    """
    index: Dict[str, Record] = {}
    for record in records:
        if not isinstance(record, Mapping):
            continue
        handle = record.get('handle')
        if not isinstance(handle, str):
            continue
        index[handle] = record
    return index


def is_ref_index(value: Any) -> bool:
    """True for a birth_ref_index/death_ref_index value that points into event_ref_list."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def event_refs(record: Record, kind: str = '') -> list:
    """
    Return the record's event_ref_list.

    Raises:
        ConversionError: If event_ref_list is missing or not a list.
    """
    refs = record.get('event_ref_list')
    if not isinstance(refs, list):
        raise ConversionError("missing event_ref_list", kind=kind, gramps_id=record.get('gramps_id'))
    return refs


def event_ref_at(record: Record, ref_index: Any) -> Optional[str]:
    """
    Follow birth_ref_index/death_ref_index style pointers.

    Args:
        record: Raw person record.
        ref_index: Index into the record's event_ref_list; negative means none.

    Returns:
        The referenced event handle, or None if the index is negative,
        out of range, or points at an entry without a ref.

    Raises:
        ConversionError: If the index points into a missing event_ref_list.
    """
    if not is_ref_index(ref_index):
        return None
    refs = event_refs(record, kind='person')
    if ref_index >= len(refs):
        return None
    entry = refs[ref_index]
    if not isinstance(entry, Mapping):
        return None
    return entry.get('ref')


def first_ref_with_role(record: Record, matches_role: Callable[[Optional[str]], bool]) -> Optional[str]:
    """
    Return the handle of the first event reference whose role label matches.

    Raises:
        ConversionError: If the family has no event_ref_list.
    """
    for entry in event_refs(record, kind='family'):
        if isinstance(entry, Mapping) and matches_role(label_of(entry.get('role'))):
            return entry.get('ref')
    return None


@dataclass
class TreeIndex:
    """
    Read-only lookups for one conversion run.

    Attributes:
        events: Raw events keyed by handle.
        places: Raw places keyed by handle.
    """
    events: Dict[str, Record] = field(default_factory=dict)
    places: Dict[str, Record] = field(default_factory=dict)

    @classmethod
    def build(cls, events: Iterable[Record], places: Iterable[Record]) -> TreeIndex:
        index = cls(events=build_index(events), places=build_index(places))
        logger.debug(f"Indexed {len(index.events)} events and {len(index.places)} places")
        return index

    def event(self, handle: Optional[str]) -> Optional[Record]:
        if not isinstance(handle, str):
            return None
        return self.events.get(handle)

    def place_title(self, handle: str) -> str:
        """
        Title of the place with this handle; the handle itself if the place is unknown.
        """
        place = self.places.get(handle)
        if place is None:
            return handle
        title = place.get('title')
        return handle if title is None else title

    def has_place(self, handle: str) -> bool:
        return handle in self.places
