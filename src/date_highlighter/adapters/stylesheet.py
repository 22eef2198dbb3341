"""Filename style-sheet adapter.

Implements the core FileStylePort by turning the filename highlight mapping
into one CSS rule per file and replacing the whole sheet on every rebuild.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from date_highlighter.core.models import HighlightResult

LOGGER = logging.getLogger(__name__)

FILE_TITLE_SELECTOR = ".nav-file-title"


def css_escape(value: str) -> str:
    """Escape ``value`` for use as a CSS identifier (CSSOM ``CSS.escape``)."""

    out: list[str] = []
    for index, ch in enumerate(value):
        code = ord(ch)
        if code == 0:
            out.append("\ufffd")
        elif (
            0x01 <= code <= 0x1F
            or code == 0x7F
            or (index == 0 and ch.isascii() and ch.isdigit())
            or (index == 1 and ch.isascii() and ch.isdigit() and value[0] == "-")
        ):
            out.append(f"\\{code:x} ")
        elif index == 0 and ch == "-" and len(value) == 1:
            out.append("\\-")
        elif code >= 0x80 or ch in "-_" or (ch.isascii() and ch.isalnum()):
            out.append(ch)
        else:
            out.append(f"\\{ch}")
    return "".join(out)


def format_rule(path: str, result: HighlightResult) -> str:
    """Return the CSS rule that colors one file title in the explorer."""

    lines = [
        f'{FILE_TITLE_SELECTOR}[data-path="{css_escape(path)}"] {{',
        f"    background-color: {result.colors.background} !important;",
        f"    color: {result.colors.text} !important;",
        "}",
    ]
    return "\n".join(lines)


def build_stylesheet(results: Mapping[str, HighlightResult]) -> str:
    """Return the full sheet, one rule per highlighted file, in path order."""

    if not results:
        return ""
    return "\n\n".join(format_rule(path, results[path]) for path in sorted(results)) + "\n"


class CssStyleSheet:
    """Style sheet buffer owned by the host, replaced wholesale on apply.

    When ``export_path`` is set the sheet is also written there so an
    external file explorer can pick it up.
    """

    def __init__(self, export_path: Optional[Union[str, Path]] = None) -> None:
        self._export_path = Path(export_path) if export_path else None
        self.text = ""
        self.results: dict[str, HighlightResult] = {}

    def apply(self, results: Mapping[str, HighlightResult]) -> None:
        self.results = dict(results)
        self.text = build_stylesheet(results)
        if self._export_path is None:
            return
        self._export_path.parent.mkdir(parents=True, exist_ok=True)
        self._export_path.write_text(self.text, encoding="utf-8")
        LOGGER.info("Style sheet written to %s (%s rules)", self._export_path, len(self.results))
