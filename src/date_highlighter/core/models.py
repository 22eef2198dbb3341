"""Value types passed between the passes, the ports and the hosts.

Offsets are absolute character positions in the document; ranges are
half-open.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """Age bucket of a detected date."""

    RECENT = "recent"
    INTERMEDIATE = "intermediate"
    OLD = "old"


@dataclass(frozen=True)
class DateMatch:
    """A single pattern occurrence inside a scanned string."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class ColorPair:
    """Resolved background and text color for one highlighted date."""

    background: str
    text: str


@dataclass(frozen=True)
class VisibleRange:
    """A visible slice of a document, with its absolute offsets."""

    start: int
    end: int
    text: str


@dataclass(frozen=True)
class HighlightResult:
    """One highlighted date produced by a pass.

    Offsets are absolute document offsets for editor content and offsets
    within the file name for filename highlighting.
    """

    start: int
    end: int
    text: str
    colors: ColorPair
    label: str


@dataclass(frozen=True)
class InlineMark:
    """Non-structural text decoration handed to the host editor."""

    start: int
    end: int
    background: str
    color: str
    tooltip: str

    @property
    def style(self) -> str:
        return f"background-color: {self.background}; color: {self.color};"
