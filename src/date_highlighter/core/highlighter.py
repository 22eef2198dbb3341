"""Highlighting passes over visible editor content and file names.

Both passes read the current instant once, so every date in a pass is
classified against the same "now". Results are never cached here; callers
decide when a pass has to run again.
"""

from __future__ import annotations

from datetime import datetime
import posixpath
from typing import Dict, Iterable, List, Optional

from date_highlighter.core.classifier import Moment, evaluate
from date_highlighter.core.config import HighlightConfig
from date_highlighter.core.date_extractor import find_dates
from date_highlighter.core.models import HighlightResult, InlineMark, VisibleRange


def highlight_visible(
    ranges: Iterable[VisibleRange],
    config: HighlightConfig,
    now: Optional[Moment] = None,
) -> List[HighlightResult]:
    """Highlight every date inside the visible ranges of a document.

    Offsets are shifted by each range's start so results are expressed in
    absolute document coordinates.
    """

    if not config.highlight_inline_content:
        return []

    instant = now if now is not None else datetime.now()
    results: List[HighlightResult] = []
    for visible in ranges:
        for match in find_dates(visible.text):
            evaluation = evaluate(match.text, config, instant)
            results.append(
                HighlightResult(
                    start=visible.start + match.start,
                    end=visible.start + match.end,
                    text=match.text,
                    colors=evaluation.colors,
                    label=evaluation.label,
                )
            )
    return results


def highlight_filenames(
    identifiers: Iterable[str],
    config: HighlightConfig,
    now: Optional[Moment] = None,
) -> Dict[str, HighlightResult]:
    """Map each file path whose name holds a date to its highlight.

    Only the name (last path component) is scanned, and only its first
    date counts. Paths without a date are left out of the mapping.
    """

    if not config.highlight_filenames:
        return {}

    instant = now if now is not None else datetime.now()
    results: Dict[str, HighlightResult] = {}
    for identifier in identifiers:
        matches = find_dates(posixpath.basename(identifier))
        if not matches:
            continue
        first = matches[0]
        evaluation = evaluate(first.text, config, instant)
        results[identifier] = HighlightResult(
            start=first.start,
            end=first.end,
            text=first.text,
            colors=evaluation.colors,
            label=evaluation.label,
        )
    return results


def to_inline_marks(results: Iterable[HighlightResult]) -> List[InlineMark]:
    """Convert content highlights to the mark instructions the host renders."""

    return [
        InlineMark(
            start=result.start,
            end=result.end,
            background=result.colors.background,
            color=result.colors.text,
            tooltip=result.label,
        )
        for result in results
    ]
