"""
family.py - Conversion of Gramps Web family records.

Module: gramps_tree.converters.family
"""
from __future__ import annotations

__all__ = ['ConvertedFamily', 'convert_family']

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from ..errors import ConversionError
from .lookup import label_of


@dataclass(frozen=True)
class ConvertedFamily:
    """
    Flattened family ready for display.

    Attributes:
        id (str): Same as gramps_id.
        gramps_handle (str): Durable Gramps handle.
        gramps_id (str): Human-facing Gramps id (e.g. 'F0001').
        father_handle (Optional[str]): Handle of the father, if any.
        mother_handle (Optional[str]): Handle of the mother, if any.
        child_handles (Tuple[str, ...]): Child person handles in family order.
        relationship_type (str): Family relationship label (e.g. 'Married').
        marriage_date (Optional[str]): Formatted marriage date.
        marriage_place (Optional[str]): Marriage place title.
    """
    id: str
    gramps_handle: str
    gramps_id: str
    father_handle: Optional[str] = None
    mother_handle: Optional[str] = None
    child_handles: Tuple[str, ...] = ()
    relationship_type: str = 'Unknown'
    marriage_date: Optional[str] = None
    marriage_place: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'grampsHandle': self.gramps_handle,
            'grampsId': self.gramps_id,
            'fatherHandle': self.father_handle,
            'motherHandle': self.mother_handle,
            'childHandles': list(self.child_handles),
            'relationshipType': self.relationship_type,
            'marriageDate': self.marriage_date,
            'marriagePlace': self.marriage_place,
        }


def _child_handles(family: Mapping[str, Any], gramps_id: Optional[str]) -> Tuple[str, ...]:
    child_refs = family.get('child_ref_list')
    if child_refs is None:
        return ()
    if not isinstance(child_refs, list):
        raise ConversionError("child_ref_list is not a list", kind='family', gramps_id=gramps_id)
    handles = []
    for child_ref in child_refs:
        if not isinstance(child_ref, Mapping) or child_ref.get('ref') is None:
            raise ConversionError("child reference without ref", kind='family', gramps_id=gramps_id)
        handles.append(child_ref['ref'])
    return tuple(handles)


def convert_family(family: Mapping[str, Any], unknown_label: str = 'Unknown') -> ConvertedFamily:
    """
    Convert a raw Gramps family.

    Marriage date and place are left as None; the tree converter resolves them
    from the family's events.

    Args:
        family: Family dict from the Gramps Web API.
        unknown_label: Relationship label used when the family has no type.

    Returns:
        ConvertedFamily

    Raises:
        ConversionError: If the record has no handle or its child references are malformed.
    """
    if not isinstance(family, Mapping):
        raise ConversionError("family record is not an object", kind='family')
    gramps_id = family.get('gramps_id')
    handle = family.get('handle')
    if handle is None:
        raise ConversionError("missing handle", kind='family', gramps_id=gramps_id)

    relationship = label_of(family.get('type'))
    return ConvertedFamily(
        id=gramps_id,
        gramps_handle=handle,
        gramps_id=gramps_id,
        father_handle=family.get('father_handle'),
        mother_handle=family.get('mother_handle'),
        child_handles=_child_handles(family, gramps_id),
        relationship_type=relationship if relationship is not None else unknown_label,
    )
