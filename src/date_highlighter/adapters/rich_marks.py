"""Rich rendering helpers for inline marks and filename highlights.

Shared by the console scan command and the Textual views so both render
highlights the same way.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from rich.color import ColorParseError
from rich.style import Style
from rich.text import Text

from date_highlighter.core.models import HighlightResult, InlineMark

LOGGER = logging.getLogger(__name__)

_SHORT_HEX = re.compile(r"#([0-9a-fA-F])([0-9a-fA-F])([0-9a-fA-F])")


def _expand_hex(color: str) -> str:
    # Rich only understands the six-digit form.
    match = _SHORT_HEX.fullmatch(color.strip())
    if not match:
        return color.strip()
    return "#" + "".join(part * 2 for part in match.groups())


def highlight_style(background: str, color: str) -> Style:
    try:
        return Style(bgcolor=_expand_hex(background), color=_expand_hex(color))
    except ColorParseError:
        LOGGER.warning("Unsupported highlight colors %r / %r", background, color)
        return Style.null()


def highlight_text(text: str, marks: Iterable[InlineMark], offset: int = 0) -> Text:
    """Return ``text`` with the marks applied.

    ``offset`` is the absolute position of ``text`` in the document; marks
    outside the slice are clipped away.
    """

    rendered = Text(text, no_wrap=True, end="")
    limit = offset + len(text)
    for mark in marks:
        start = max(mark.start, offset)
        end = min(mark.end, limit)
        if start >= end:
            continue
        rendered.stylize(highlight_style(mark.background, mark.color), start - offset, end - offset)
    return rendered


def filename_label(path: str, result: Optional[HighlightResult]) -> Text:
    """Return the file path with its whole title colored, as the explorer does."""

    if result is None:
        return Text(path)
    label = Text(path, style=highlight_style(result.colors.background, result.colors.text))
    if result.label:
        label.append(f"  {result.label}", style="dim")
    return label
