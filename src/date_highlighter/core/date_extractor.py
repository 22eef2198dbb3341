"""Date pattern matching and strict parsing (core domain)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
import re
from typing import List, Optional

from date_highlighter.core.models import DateMatch


@dataclass(frozen=True)
class DatePattern:
    """One supported textual date format.

    ``regex`` finds candidates inside free text; ``parse`` only accepts a
    string that has exactly the format's shape and names a real calendar day.
    """

    name: str
    regex: re.Pattern

    def parse(self, raw: str) -> Optional[date]:
        match = self.regex.fullmatch(raw)
        if not match:
            return None
        try:
            return date(int(match.group("year")), int(match.group("month")), int(match.group("day")))
        except ValueError:
            return None


def _pattern(name: str, expression: str) -> DatePattern:
    # ASCII keeps \d from accepting other Unicode digit scripts.
    return DatePattern(name=name, regex=re.compile(expression, re.ASCII))


# Declaration order is significant: parse_date takes the first valid format.
DATE_PATTERNS: tuple[DatePattern, ...] = (
    _pattern("YYYY-MM-DD", r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"),
    _pattern("MM/DD/YYYY", r"(?P<month>\d{2})/(?P<day>\d{2})/(?P<year>\d{4})"),
    _pattern("DD-MM-YYYY", r"(?P<day>\d{2})-(?P<month>\d{2})-(?P<year>\d{4})"),
    _pattern("YYYY.MM.DD", r"(?P<year>\d{4})\.(?P<month>\d{2})\.(?P<day>\d{2})"),
)


def find_dates(text: str) -> List[DateMatch]:
    """Return every date-shaped substring of ``text``.

    Each pattern scans the whole string left to right without overlap. The
    per-pattern results are concatenated in declaration order and are not
    deduplicated against each other.
    """

    matches: List[DateMatch] = []
    for pattern in DATE_PATTERNS:
        for found in pattern.regex.finditer(text):
            matches.append(DateMatch(text=found.group(0), start=found.start(), end=found.end()))
    return matches


def parse_date(raw: str) -> Optional[date]:
    """Strictly parse ``raw`` with the first format that accepts it."""

    for pattern in DATE_PATTERNS:
        parsed = pattern.parse(raw)
        if parsed is not None:
            return parsed
    return None
