"""
tree.py - Whole-tree conversion with cross-record enrichment.

TreeConverter converts a batch of raw Gramps people, families, events and
places, then fills in details that live on other records:
    - person birth/death date and place, via birth_ref_index/death_ref_index
      -> event -> place
    - family marriage date and place, via the first event reference whose role
      marks a marriage -> event -> place

Conversion is best-effort. A record that fails to convert is left out of the
output and described in report.errors; its siblings are still converted and
the call itself does not raise.

Module: gramps_tree.converters.tree
"""
from __future__ import annotations

__all__ = ['GrampsTreeData', 'ConvertedTree', 'ConversionReport', 'TreeConverter', 'convert_tree']

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, TypeVar, Union

from ..app_hooks import AppHooks
from ..gramps_date import format_gramps_date
from .config import ConversionConfig
from .event import ConvertedEvent, convert_event
from .family import ConvertedFamily, convert_family
from .lookup import Record, TreeIndex, event_ref_at, event_refs, first_ref_with_role, is_ref_index
from .person import ConvertedPerson, convert_person
from .place import ConvertedPlace, convert_place

logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass
class GrampsTreeData:
    """
    Raw record collections as fetched from a Gramps Web server.

    Attributes:
        people: Raw person dicts.
        families: Raw family dicts.
        events: Raw event dicts.
        places: Raw place dicts.
    """
    people: List[Record] = field(default_factory=list)
    families: List[Record] = field(default_factory=list)
    events: List[Record] = field(default_factory=list)
    places: List[Record] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GrampsTreeData:
        """Build from a mapping with 'people', 'families', 'events' and 'places' keys."""
        return cls(
            people=list(data.get('people') or []),
            families=list(data.get('families') or []),
            events=list(data.get('events') or []),
            places=list(data.get('places') or []),
        )


@dataclass
class ConversionReport:
    """
    Summary of one tree conversion.

    Counts reflect successfully converted records, not input sizes.
    """
    people_count: int = 0
    families_count: int = 0
    events_count: int = 0
    places_count: int = 0
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'peopleCount': self.people_count,
            'familiesCount': self.families_count,
            'eventsCount': self.events_count,
            'placesCount': self.places_count,
            'warnings': list(self.warnings),
            'errors': list(self.errors),
        }


@dataclass
class ConvertedTree:
    people: List[ConvertedPerson] = field(default_factory=list)
    families: List[ConvertedFamily] = field(default_factory=list)
    events: List[ConvertedEvent] = field(default_factory=list)
    places: List[ConvertedPlace] = field(default_factory=list)
    report: ConversionReport = field(default_factory=ConversionReport)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'people': [p.to_dict() for p in self.people],
            'families': [f.to_dict() for f in self.families],
            'events': [e.to_dict() for e in self.events],
            'places': [p.to_dict() for p in self.places],
            'report': self.report.to_dict(),
        }


def _describe_failure(error: Exception) -> str:
    message = str(error)
    if isinstance(error, KeyError):
        message = f"missing field {message}"
    return message or type(error).__name__


def _record_id(record: Any) -> Any:
    return record.get('gramps_id') if isinstance(record, Mapping) else None


class TreeConverter:
    """
    Converts a complete Gramps tree dataset.

    The converter keeps only its configuration and hooks between calls; every
    call to convert() builds its own indexes and output collections.

    Attributes:
        config (ConversionConfig): Conversion settings.
        app_hooks (Optional[AppHooks]): Receives per-phase progress.
    """

    def __init__(self, config: Optional[ConversionConfig] = None, app_hooks: Optional[AppHooks] = None) -> None:
        self.config = config or ConversionConfig.default()
        self.app_hooks = app_hooks

    def convert(self, data: Union[GrampsTreeData, Mapping[str, Any]]) -> ConvertedTree:
        """
        Convert and enrich a tree dataset.

        Args:
            data: GrampsTreeData or a mapping with the four raw collections.

        Returns:
            ConvertedTree: Converted collections (input order, failures skipped) and a report.
        """
        if not isinstance(data, GrampsTreeData):
            data = GrampsTreeData.from_dict(data)

        report = ConversionReport()
        indexed = len(data.events) + len(data.places)
        self._report_step(info="Indexing events and places", target=indexed, reset_counter=True, plus_step=0)
        index = TreeIndex.build(data.events, data.places)
        self._report_step(plus_step=indexed)

        self._report_step(info="Converting people", target=len(data.people), reset_counter=True, plus_step=0)
        people = self._convert_all(
            'person', data.people, lambda raw: self._convert_person(raw, index, report), report)
        self._report_step(plus_step=len(data.people))

        self._report_step(info="Converting families", target=len(data.families), reset_counter=True, plus_step=0)
        families = self._convert_all(
            'family', data.families, lambda raw: self._convert_family(raw, index, report), report)
        self._report_step(plus_step=len(data.families))

        unknown = self.config.unknown_label
        self._report_step(info="Converting events", target=len(data.events), reset_counter=True, plus_step=0)
        events = self._convert_all('event', data.events, lambda raw: convert_event(raw, unknown), report)
        self._report_step(plus_step=len(data.events))

        self._report_step(info="Converting places", target=len(data.places), reset_counter=True, plus_step=0)
        places = self._convert_all('place', data.places, lambda raw: convert_place(raw, unknown), report)
        self._report_step(plus_step=len(data.places))

        report.people_count = len(people)
        report.families_count = len(families)
        report.events_count = len(events)
        report.places_count = len(places)

        logger.info(
            f"Converted {report.people_count} people, {report.families_count} families, "
            f"{report.events_count} events, {report.places_count} places "
            f"({len(report.errors)} errors, {len(report.warnings)} warnings)"
        )
        return ConvertedTree(people=people, families=families, events=events, places=places, report=report)

    def _convert_all(self, kind: str, records: List[Record], convert: Callable[[Record], T],
                     report: ConversionReport) -> List[T]:
        """
        Convert each record, collecting failures into report.errors. (Private method)
        """
        converted: List[T] = []
        for record in records:
            try:
                converted.append(convert(record))
            except Exception as e:
                message = f"Failed to convert {kind} {_record_id(record)}: {_describe_failure(e)}"
                logger.warning(message)
                report.errors.append(message)
        return converted

    def _resolve_event(self, event_handle: Optional[str], index: TreeIndex, owner: str, what: str,
                       report: ConversionReport) -> Optional[Tuple[Optional[str], Optional[str]]]:
        """
        Look up an event and its place title. (Private method)

        Returns:
            (date, place) or None if the event is not in the index. The place is
            the place title, the raw place handle when the place is unknown, or
            None when the event has no place.
        """
        event = index.event(event_handle)
        if event is None:
            if event_handle is not None:
                self._lookup_miss(report, f"{owner}: {what} event {event_handle} not found")
            return None
        date = format_gramps_date(event.get('date'))
        place = None
        place_handle = event.get('place')
        if isinstance(place_handle, str) and place_handle:
            if not index.has_place(place_handle):
                self._lookup_miss(report, f"{owner}: {what} place {place_handle} not found")
            place = index.place_title(place_handle)
        return date, place

    def _ref_handle(self, person: Record, key: str, owner: str, report: ConversionReport) -> Optional[str]:
        ref_index = person.get(key, -1)
        handle = event_ref_at(person, ref_index)
        if handle is None and is_ref_index(ref_index) and ref_index >= len(event_refs(person, kind='person')):
            self._lookup_miss(report, f"{owner}: {key} {ref_index} out of range")
        return handle

    def _convert_person(self, raw: Record, index: TreeIndex, report: ConversionReport) -> ConvertedPerson:
        person = convert_person(raw)
        owner = f"Person {person.gramps_id}"
        updates: Dict[str, Optional[str]] = {}

        birth = self._resolve_event(self._ref_handle(raw, 'birth_ref_index', owner, report), index, owner, 'birth', report)
        if birth is not None:
            updates['birth_date'], updates['birth_place'] = birth

        death = self._resolve_event(self._ref_handle(raw, 'death_ref_index', owner, report), index, owner, 'death', report)
        if death is not None:
            updates['death_date'], updates['death_place'] = death

        return replace(person, **updates) if updates else person

    def _convert_family(self, raw: Record, index: TreeIndex, report: ConversionReport) -> ConvertedFamily:
        family = convert_family(raw, self.config.unknown_label)
        marriage_handle = first_ref_with_role(raw, self.config.is_marriage_role)
        if marriage_handle is None:
            return family
        marriage = self._resolve_event(marriage_handle, index, f"Family {family.gramps_id}", 'marriage', report)
        if marriage is None:
            return family
        marriage_date, marriage_place = marriage
        return replace(family, marriage_date=marriage_date, marriage_place=marriage_place)

    def _lookup_miss(self, report: ConversionReport, message: str) -> None:
        if self.config.report_lookup_misses:
            report.warnings.append(message)
        else:
            logger.debug(message)

    def _report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """
        Report a step via app hooks if available. (Private method)

        Args:
            info (str): Information message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "report_step", None)):
            self.app_hooks.report_step(info=info, target=target, reset_counter=reset_counter, plus_step=plus_step)
        elif info:
            logger.debug(info)


def convert_tree(data: Union[GrampsTreeData, Mapping[str, Any]],
                 config: Optional[ConversionConfig] = None,
                 app_hooks: Optional[AppHooks] = None) -> ConvertedTree:
    """
    Convert a Gramps tree dataset in one call.

    Args:
        data: GrampsTreeData or a mapping with 'people', 'families', 'events', 'places'.
        config: Conversion settings; the packaged defaults when omitted.
        app_hooks: Optional progress hooks.

    Returns:
        ConvertedTree
    """
    return TreeConverter(config=config, app_hooks=app_hooks).convert(data)
