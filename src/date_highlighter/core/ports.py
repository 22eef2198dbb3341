"""Ports (interfaces) used by the core highlighting pipeline.

Ports define the minimal contracts for the editor, file listing, style and
settings adapters so that the core can be reused with different hosts.
"""

from __future__ import annotations

from typing import Mapping, Protocol, Sequence

from date_highlighter.core.config import HighlightConfig
from date_highlighter.core.models import HighlightResult, VisibleRange


class EditorViewPort(Protocol):
    """Editor operations required by inline highlighting."""

    def visible_ranges(self) -> Sequence[VisibleRange]:
        ...


class FileListingPort(Protocol):
    """File listing operations required by filename highlighting."""

    def list_files(self) -> list[str]:
        ...


class FileStylePort(Protocol):
    """Receives the complete filename highlight mapping after each rebuild."""

    def apply(self, results: Mapping[str, HighlightResult]) -> None:
        ...


class SettingsStorePort(Protocol):
    """Persistence operations for the highlight settings."""

    def load(self) -> HighlightConfig:
        ...

    def save(self, config: HighlightConfig) -> None:
        ...
