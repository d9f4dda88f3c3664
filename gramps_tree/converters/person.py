"""
person.py - Conversion of Gramps Web person records.

Maps one raw person (as returned by the Gramps Web API) onto a flat
ConvertedPerson. Birth and death details need event and place lookups and are
filled in later by the tree converter.

Module: gramps_tree.converters.person
"""
from __future__ import annotations

__all__ = ['ConvertedPerson', 'convert_person', 'primary_surname', 'GENDER_MAP']

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from ..errors import ConversionError

# Gramps gender codes
GENDER_MAP: Dict[int, str] = {
    0: 'U',
    1: 'M',
    2: 'F',
}


@dataclass(frozen=True)
class ConvertedPerson:
    """
    Flattened person ready for display.

    Attributes:
        id (str): Same as gramps_id.
        gramps_handle (str): Durable Gramps handle.
        gramps_id (str): Human-facing Gramps id (e.g. 'I0001').
        first_name (str): Given name(s).
        last_name (str): Primary surname.
        suffix (str): Name suffix (e.g. 'Jr.').
        gender (str): 'M', 'F' or 'U'.
        birth_date (Optional[str]): Formatted birth date.
        birth_place (Optional[str]): Birth place title.
        death_date (Optional[str]): Formatted death date.
        death_place (Optional[str]): Death place title.
        family_ids (Tuple[str, ...]): Handles of families this person heads.
        parent_family_ids (Tuple[str, ...]): Handles of families this person is a child in.
    """
    id: str
    gramps_handle: str
    gramps_id: str
    first_name: str = ''
    last_name: str = ''
    suffix: str = ''
    gender: str = 'U'
    birth_date: Optional[str] = None
    birth_place: Optional[str] = None
    death_date: Optional[str] = None
    death_place: Optional[str] = None
    family_ids: Tuple[str, ...] = ()
    parent_family_ids: Tuple[str, ...] = ()

    @property
    def full_name(self) -> str:
        return ' '.join(part for part in (self.first_name, self.last_name, self.suffix) if part)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'grampsHandle': self.gramps_handle,
            'grampsId': self.gramps_id,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'suffix': self.suffix,
            'gender': self.gender,
            'birthDate': self.birth_date,
            'birthPlace': self.birth_place,
            'deathDate': self.death_date,
            'deathPlace': self.death_place,
            'familyIds': list(self.family_ids),
            'parentFamilyIds': list(self.parent_family_ids),
        }


def primary_surname(name: Mapping[str, Any], gramps_id: Optional[str] = None) -> str:
    """
    Pick the surname flagged primary, else the first surname, else ''.

    Raises:
        ConversionError: If surname_list is present but not a list of surname objects.
    """
    surnames = name.get('surname_list')
    if surnames is None:
        return ''
    if not isinstance(surnames, list):
        raise ConversionError("surname_list is not a list", kind='person', gramps_id=gramps_id)
    for surname in surnames:
        if not isinstance(surname, Mapping):
            raise ConversionError("surname_list contains a non-object entry", kind='person', gramps_id=gramps_id)
    for surname in surnames:
        if surname.get('primary'):
            return surname.get('surname') or ''
    if surnames:
        return surnames[0].get('surname') or ''
    return ''


def _handle_list(person: Mapping[str, Any], key: str, gramps_id: Optional[str]) -> Tuple[str, ...]:
    handles = person.get(key)
    if handles is None:
        return ()
    if not isinstance(handles, list):
        raise ConversionError(f"{key} is not a list", kind='person', gramps_id=gramps_id)
    return tuple(handles)


def convert_person(person: Mapping[str, Any]) -> ConvertedPerson:
    """
    Convert a raw Gramps person.

    Args:
        person: Person dict from the Gramps Web API.

    Returns:
        ConvertedPerson with birth/death fields left as None.

    Raises:
        ConversionError: If the record has no handle or no primary_name object,
            or one of its lists is malformed.
    """
    if not isinstance(person, Mapping):
        raise ConversionError("person record is not an object", kind='person')
    gramps_id = person.get('gramps_id')
    handle = person.get('handle')
    if handle is None:
        raise ConversionError("missing handle", kind='person', gramps_id=gramps_id)

    name = person.get('primary_name')
    if not isinstance(name, Mapping):
        raise ConversionError("missing primary_name", kind='person', gramps_id=gramps_id)

    gender = person.get('gender')
    if isinstance(gender, bool) or not isinstance(gender, int):
        gender_code = 'U'
    else:
        gender_code = GENDER_MAP.get(gender, 'U')

    return ConvertedPerson(
        id=gramps_id,
        gramps_handle=handle,
        gramps_id=gramps_id,
        first_name=name.get('first_name') or '',
        last_name=primary_surname(name, gramps_id),
        suffix=name.get('suffix') or '',
        gender=gender_code,
        family_ids=_handle_list(person, 'family_list', gramps_id),
        parent_family_ids=_handle_list(person, 'parent_family_list', gramps_id),
    )
