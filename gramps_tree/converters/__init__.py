"""Converters: Gramps Web records to flat, display-ready data.

Core classes and functions:
    - TreeConverter / convert_tree: Convert a whole dataset and resolve
      birth, death and marriage details across records
    - convert_person, convert_family, convert_event, convert_place:
      Single-record converters with no cross-record lookups
    - ConversionConfig: YAML-backed settings
    - ConversionReport: Counts, warnings and per-record errors

Example:
    >>> from gramps_tree.converters import convert_tree
    >>> tree = convert_tree({"people": people, "families": families,
    ...                      "events": events, "places": places})
    >>> for error in tree.report.errors:
    ...     print(error)
"""

from .config import ConversionConfig
from .person import ConvertedPerson, convert_person
from .family import ConvertedFamily, convert_family
from .event import ConvertedEvent, convert_event
from .place import ConvertedPlace, convert_place, parse_coordinate
from .tree import ConversionReport, ConvertedTree, GrampsTreeData, TreeConverter, convert_tree

__all__ = [
    'ConversionConfig',
    'ConvertedPerson',
    'convert_person',
    'ConvertedFamily',
    'convert_family',
    'ConvertedEvent',
    'convert_event',
    'ConvertedPlace',
    'convert_place',
    'parse_coordinate',
    'ConversionReport',
    'ConvertedTree',
    'GrampsTreeData',
    'TreeConverter',
    'convert_tree',
]
