"""
gramps_date.py - Date formatting for Gramps Web date structures.

Provides the GrampsDate class, a light wrapper around the date objects returned
by the Gramps Web API, and format_gramps_date() which renders one as a canonical
display string:
    - a non-empty free-text override wins over the structured value
    - the (day, month, year, is_bce) tuple renders as YYYY-MM-DD, dropping
      unknown (zero) parts
    - 'before', 'after' and 'about' modifiers become a word prefix

Module: gramps_tree.gramps_date
"""
__all__ = ['GrampsDate', 'format_gramps_date', 'MODIFIER_PREFIXES']

import logging
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

# Only these modifiers get a prefix; calculated/estimated/interpreted render bare.
MODIFIER_PREFIXES = {
    'before': 'before ',
    'after': 'after ',
    'about': 'about ',
}


class GrampsDate:
    """
    A Gramps date value.

    Attributes:
        modifier (str): 'none', 'before', 'after', 'about', 'calculated', 'estimated' or 'interpreted'.
        quality (str): 'normal', 'estimated' or 'calculated'.
        text (str): Free-text override (may be empty).
        dateval (Optional[Tuple[int, int, int, bool]]): (day, month, year, is_bce); 0 means unknown.
    """
    __slots__ = [
        'modifier',
        'quality',
        'text',
        'dateval'
    ]

    def __init__(self, modifier: str = 'none', quality: str = 'normal', text: str = '',
                 dateval: Optional[Sequence[Any]] = None):
        self.modifier: str = modifier or 'none'
        self.quality: str = quality or 'normal'
        self.text: str = text or ''
        self.dateval: Optional[Tuple[int, int, int, bool]] = self._parse_dateval(dateval)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional["GrampsDate"]:
        """
        Build a GrampsDate from the raw API dict.

        Args:
            data: The raw 'date' object of an event, or None.

        Returns:
            GrampsDate or None if data is empty or not a mapping.
        """
        if not data or not isinstance(data, Mapping):
            return None
        return cls(
            modifier=data.get('modifier') or 'none',
            quality=data.get('quality') or 'normal',
            text=data.get('text') or '',
            dateval=data.get('dateval'),
        )

    @staticmethod
    def _parse_dateval(dateval: Optional[Sequence[Any]]) -> Optional[Tuple[int, int, int, bool]]:
        """
        Normalise a raw dateval to (day, month, year, is_bce). (Private method)

        Compound dates (ranges/spans) carry eight entries; only the first four
        describe the start date and are used here. Anything that does not hold
        three integers is treated as no structured date.
        """
        if dateval is None or isinstance(dateval, (str, bytes)):
            return None
        try:
            values = list(dateval)
        except TypeError:
            logger.debug(f"Ignoring non-sequence dateval: {dateval!r}")
            return None
        if len(values) < 3:
            return None
        try:
            day, month, year = (int(v or 0) for v in values[:3])
        except (TypeError, ValueError):
            logger.debug(f"Ignoring malformed dateval: {dateval!r}")
            return None
        is_bce = bool(values[3]) if len(values) > 3 else False
        return day, month, year, is_bce

    @property
    def day(self) -> int:
        return self.dateval[0] if self.dateval else 0

    @property
    def month(self) -> int:
        return self.dateval[1] if self.dateval else 0

    @property
    def year(self) -> int:
        return self.dateval[2] if self.dateval else 0

    @property
    def prefix(self) -> str:
        """Qualifier word for the modifier, including trailing space."""
        return MODIFIER_PREFIXES.get(self.modifier, '')

    def formatted(self) -> Optional[str]:
        """
        Render the date as a display string.

        Returns:
            str or None: The free text if set, else 'YYYY-MM-DD' with unknown parts
            omitted and the modifier prefix applied; None if nothing is known.
        """
        if self.text:
            return self.text
        if not self.dateval:
            return None
        parts = []
        if self.year:
            parts.append(str(self.year))
        if self.month:
            parts.append(f"{self.month:02d}")
        if self.day:
            parts.append(f"{self.day:02d}")
        if not parts:
            return None
        return f"{self.prefix}{'-'.join(parts)}"

    def __repr__(self) -> str:
        return f"GrampsDate(modifier={self.modifier!r}, text={self.text!r}, dateval={self.dateval!r})"

    def __str__(self) -> str:
        return self.formatted() or ''


def format_gramps_date(date: Union[GrampsDate, Mapping[str, Any], None]) -> Optional[str]:
    """
    Format a Gramps date as a human-readable string.

    Args:
        date: A GrampsDate, the raw API date dict, or None.

    Returns:
        str or None: Canonical display string, or None when there is no usable date.
    """
    if date is None:
        return None
    if not isinstance(date, GrampsDate):
        date = GrampsDate.from_dict(date)
        if date is None:
            return None
    return date.formatted()
