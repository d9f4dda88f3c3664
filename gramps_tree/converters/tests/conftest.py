"""
Pytest fixtures for converter tests.

Factories build raw records shaped like Gramps Web API JSON responses.
"""
from __future__ import annotations

import copy

import pytest

from gramps_tree.converters.config import ConversionConfig


def _event_ref(ref: str, role: str = "Primary") -> dict:
    return {
        "_class": "EventRef",
        "ref": ref,
        "role": {"_class": "EventRoleType", "string": role},
        "attribute_list": [],
        "note_list": [],
        "privacy": False,
    }


def _merge(base: dict, overrides: dict) -> dict:
    record = copy.deepcopy(base)
    record.update(overrides)
    return record


@pytest.fixture
def event_ref():
    """Build an event reference."""
    return _event_ref


@pytest.fixture
def make_person():
    """Create a raw person; keyword arguments replace top-level fields."""
    base = {
        "_class": "Person",
        "handle": "h001",
        "gramps_id": "I0001",
        "gender": 1,
        "primary_name": {
            "_class": "Name",
            "type": {"_class": "NameType", "string": "Birth Name"},
            "first_name": "John",
            "surname_list": [
                {
                    "surname": "Smith",
                    "primary": True,
                    "origintype": {"_class": "NameOriginType", "string": ""},
                    "connector": "",
                    "prefix": "",
                },
            ],
            "suffix": "Jr.",
            "title": "",
            "call": "",
            "nick": "",
        },
        "alternate_names": [],
        "death_ref_index": -1,
        "birth_ref_index": -1,
        "event_ref_list": [],
        "family_list": ["fh001"],
        "parent_family_list": ["fh000"],
        "citation_list": [],
        "note_list": [],
        "change": 0,
        "tag_list": [],
        "private": False,
    }

    def _create_person(**overrides) -> dict:
        return _merge(base, overrides)

    return _create_person


@pytest.fixture
def make_family():
    """Create a raw family; keyword arguments replace top-level fields."""
    base = {
        "_class": "Family",
        "handle": "fh001",
        "gramps_id": "F0001",
        "father_handle": "h001",
        "mother_handle": "h002",
        "child_ref_list": [
            {
                "_class": "ChildRef",
                "ref": "h003",
                "frel": {"_class": "ChildRefType", "string": "Birth"},
                "mrel": {"_class": "ChildRefType", "string": "Birth"},
                "note_list": [],
                "citation_list": [],
                "privacy": False,
            },
        ],
        "type": {"_class": "FamilyRelType", "string": "Married"},
        "event_ref_list": [],
        "citation_list": [],
        "note_list": [],
        "change": 0,
        "tag_list": [],
        "private": False,
    }

    def _create_family(**overrides) -> dict:
        return _merge(base, overrides)

    return _create_family


@pytest.fixture
def make_date():
    """Create a raw Gramps date."""
    def _create_date(dateval=None, text="", modifier="none") -> dict:
        return {
            "_class": "Date",
            "modifier": modifier,
            "quality": "normal",
            "dateval": list(dateval) if dateval is not None else None,
            "text": text,
            "sortval": 0,
            "newyear": 0,
        }

    return _create_date


@pytest.fixture
def make_event(make_date):
    """Create a raw event; keyword arguments replace top-level fields."""
    base = {
        "_class": "Event",
        "handle": "eh001",
        "gramps_id": "E0001",
        "type": {"_class": "EventType", "string": "Birth"},
        "date": make_date(dateval=(15, 6, 1980, False), text="15 Jun 1980"),
        "description": "Birth of John",
        "place": "ph001",
        "citation_list": [],
        "note_list": [],
        "change": 0,
        "tag_list": [],
        "private": False,
    }

    def _create_event(**overrides) -> dict:
        return _merge(base, overrides)

    return _create_event


@pytest.fixture
def make_place():
    """Create a raw place; keyword arguments replace top-level fields."""
    base = {
        "_class": "Place",
        "handle": "ph001",
        "gramps_id": "P0001",
        "title": "Springfield, USA",
        "long_name": "Springfield, Illinois, USA",
        "name": {"_class": "PlaceName", "value": "Springfield", "lang": ""},
        "alt_names": [],
        "placeref_list": [],
        "lat": "39.7817",
        "long": "-89.6501",
        "type": {"_class": "PlaceType", "string": "City"},
        "code": "",
        "citation_list": [],
        "note_list": [],
        "change": 0,
        "tag_list": [],
        "private": False,
    }

    def _create_place(**overrides) -> dict:
        return _merge(base, overrides)

    return _create_place


@pytest.fixture
def default_config():
    """Default conversion configuration."""
    return ConversionConfig.default()
