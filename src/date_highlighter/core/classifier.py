"""Age classification and relative-time labels (core domain)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
import logging
from typing import Optional, Union

from date_highlighter.core.config import HighlightConfig
from date_highlighter.core.date_extractor import parse_date
from date_highlighter.core.models import Category, ColorPair

LOGGER = logging.getLogger(__name__)

Moment = Union[date, datetime]

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class Evaluation:
    """Classification of one raw date string against a fixed instant."""

    category: Optional[Category]
    colors: ColorPair
    label: str


def days_since(parsed: date, now: Moment) -> int:
    """Whole days from midnight of ``parsed`` to ``now``, truncated toward zero.

    A plain ``date`` for ``now`` is read as midnight. The parsed day takes
    the tzinfo of ``now`` so aware and naive instants both work.
    """

    if not isinstance(now, datetime):
        now = datetime.combine(now, time.min)
    start = datetime.combine(parsed, time.min, tzinfo=now.tzinfo)
    delta = now - start
    whole = abs(delta) // _ONE_DAY
    return whole if delta >= timedelta(0) else -whole


def categorize(days: int, config: HighlightConfig) -> Category:
    """Bucket an age in days; negative ages (future dates) are recent."""

    if days <= config.recent_days:
        return Category.RECENT
    if days <= config.intermediate_days:
        return Category.INTERMEDIATE
    return Category.OLD


def colors_for(category: Category, config: HighlightConfig) -> ColorPair:
    background = {
        Category.RECENT: config.recent_color,
        Category.INTERMEDIATE: config.intermediate_color,
        Category.OLD: config.old_color,
    }[category]
    return ColorPair(background=background, text=config.text_color)


def format_relative(days: int) -> str:
    if days == 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if days == -1:
        return "Tomorrow"
    if days > 0:
        return f"{days} days ago"
    return f"In {abs(days)} days"


def evaluate(raw: str, config: HighlightConfig, now: Moment) -> Evaluation:
    """Parse once and return category, colors, and label for ``raw``.

    Text that has a date shape but is not a calendar date degrades to the
    old colors with an empty label instead of failing the pass.
    """

    parsed = parse_date(raw)
    if parsed is None:
        LOGGER.debug("Unparsable date %r, using old colors", raw)
        return Evaluation(category=None, colors=colors_for(Category.OLD, config), label="")

    days = days_since(parsed, now)
    category = categorize(days, config)
    return Evaluation(category=category, colors=colors_for(category, config), label=format_relative(days))


def classify(raw: str, config: HighlightConfig, now: Moment) -> ColorPair:
    """Return the background/text colors for a raw date string."""

    return evaluate(raw, config, now).colors


def relative_label(raw: str, now: Moment) -> str:
    """Return "Today", "3 days ago", "In 2 days", ... or "" if unparsable."""

    parsed = parse_date(raw)
    if parsed is None:
        return ""
    return format_relative(days_since(parsed, now))
