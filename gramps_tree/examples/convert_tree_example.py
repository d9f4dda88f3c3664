"""
Example: Converting a Gramps Web dataset into a display-ready tree.

This example demonstrates how to:
1. Assemble raw records as they come back from the Gramps Web API
2. Convert and enrich them in one call
3. Check the conversion report for partial failures
4. Export the result as JSON
"""

import json
import logging

from gramps_tree import ConversionConfig, GrampsTreeData, TreeConverter


def example_convert_tree():
    """Example workflow converting a small tree."""
    logging.basicConfig(level=logging.INFO)

    # Step 1: Raw records (normally fetched from /api/people/, /api/families/, ...)
    data = load_sample_data()
    print(f"Loaded {len(data.people)} people, {len(data.families)} families")

    # Step 2: Convert
    config = ConversionConfig.default()
    tree = TreeConverter(config=config).convert(data)

    # Step 3: Report
    report = tree.report
    print(f"Converted {report.people_count} people, {report.families_count} families, "
          f"{report.events_count} events, {report.places_count} places")
    for error in report.errors:
        print(f"  error: {error}")

    for person in tree.people:
        print(f"{person.full_name}: born {person.birth_date or '?'} in {person.birth_place or '?'}")
    for family in tree.families:
        print(f"{family.gramps_id}: married {family.marriage_date or '?'} in {family.marriage_place or '?'}")

    # Step 4: Export
    with open('tree.json', 'w', encoding='utf-8') as f:
        json.dump(tree.to_dict(), f, indent=2)
    print("\nResult exported to tree.json")


def _event_ref(ref, role="Primary"):
    return {"_class": "EventRef", "ref": ref, "role": {"_class": "EventRoleType", "string": role}}


def _name(first_name, surname):
    return {"_class": "Name", "first_name": first_name, "surname_list": [{"surname": surname, "primary": True}], "suffix": ""}


def load_sample_data():
    """Sample records shaped like Gramps Web API responses."""
    people = [
        {
            "handle": "h001", "gramps_id": "I0001", "gender": 1,
            "primary_name": _name("John", "Doe"),
            "event_ref_list": [_event_ref("e001"), _event_ref("e002")],
            "birth_ref_index": 0, "death_ref_index": 1,
            "family_list": ["f001"], "parent_family_list": [],
        },
        {
            "handle": "h002", "gramps_id": "I0002", "gender": 2,
            "primary_name": _name("Jane", "Smith"),
            "event_ref_list": [], "birth_ref_index": -1, "death_ref_index": -1,
            "family_list": ["f001"], "parent_family_list": [],
        },
        # Broken record: no primary_name, reported in report.errors
        {"handle": "h003", "gramps_id": "I0003", "gender": 0},
    ]
    families = [
        {
            "handle": "f001", "gramps_id": "F0001",
            "father_handle": "h001", "mother_handle": "h002",
            "child_ref_list": [], "type": {"string": "Married"},
            "event_ref_list": [_event_ref("e003", role="Family")],
        },
    ]
    events = [
        {"handle": "e001", "gramps_id": "E0001", "type": {"string": "Birth"},
         "date": {"modifier": "none", "dateval": [1, 1, 1900, False], "text": ""}, "place": "p001"},
        {"handle": "e002", "gramps_id": "E0002", "type": {"string": "Death"},
         "date": {"modifier": "about", "dateval": [0, 0, 1975, False], "text": ""}, "place": "p001"},
        {"handle": "e003", "gramps_id": "E0003", "type": {"string": "Marriage"},
         "date": {"modifier": "none", "dateval": None, "text": "circa 1925"}, "place": "p002"},
    ]
    places = [
        {"handle": "p001", "gramps_id": "P0001", "title": "London, England", "lat": "51.5074", "long": "-0.1278",
         "type": {"string": "City"}},
        {"handle": "p002", "gramps_id": "P0002", "title": "Paris, France", "lat": "", "long": "",
         "type": {"string": "City"}},
    ]
    return GrampsTreeData(people=people, families=families, events=events, places=places)


if __name__ == '__main__':
    example_convert_tree()
