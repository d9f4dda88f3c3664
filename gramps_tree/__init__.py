"""gramps_tree package: Converts Gramps Web records into a flat, display-ready family tree."""

from gramps_tree.app_hooks import AppHooks
from gramps_tree.errors import ConversionError, GrampsApiError, GrampsError
from gramps_tree.gramps_date import GrampsDate, format_gramps_date
from gramps_tree.converters import (
    ConversionConfig,
    ConversionReport,
    ConvertedEvent,
    ConvertedFamily,
    ConvertedPerson,
    ConvertedPlace,
    ConvertedTree,
    GrampsTreeData,
    TreeConverter,
    convert_event,
    convert_family,
    convert_person,
    convert_place,
    convert_tree,
)
from gramps_tree.validation import check_api_compatibility, validate_server_url

__all__ = [
    "AppHooks",
    "ConversionConfig",
    "ConversionError",
    "ConversionReport",
    "ConvertedEvent",
    "ConvertedFamily",
    "ConvertedPerson",
    "ConvertedPlace",
    "ConvertedTree",
    "GrampsApiError",
    "GrampsDate",
    "GrampsError",
    "GrampsTreeData",
    "TreeConverter",
    "check_api_compatibility",
    "convert_event",
    "convert_family",
    "convert_person",
    "convert_place",
    "convert_tree",
    "format_gramps_date",
    "validate_server_url",
]
