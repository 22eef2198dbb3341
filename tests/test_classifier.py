from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from date_highlighter.core.classifier import (
    categorize,
    classify,
    days_since,
    evaluate,
    format_relative,
    relative_label,
)
from date_highlighter.core.config import HighlightConfig
from date_highlighter.core.models import Category, ColorPair

NOW = datetime(2024, 3, 30)
CONFIG = HighlightConfig(recent_days=14, intermediate_days=30)

RECENT = ColorPair(background="#a4e7c3", text="#000000")
INTERMEDIATE = ColorPair(background="#e7dba4", text="#000000")
OLD = ColorPair(background="#e7a4a4", text="#000000")


@pytest.mark.parametrize(
    "raw, colors",
    [
        ("2024-03-29", RECENT),
        ("2024-03-10", INTERMEDIATE),
        ("2024-02-01", OLD),
        ("2024-04-02", RECENT),
    ],
)
def test_classify_buckets_by_age(raw: str, colors: ColorPair) -> None:
    assert classify(raw, CONFIG, NOW) == colors


def test_bucket_boundaries_are_inclusive() -> None:
    assert categorize(14, CONFIG) is Category.RECENT
    assert categorize(15, CONFIG) is Category.INTERMEDIATE
    assert categorize(30, CONFIG) is Category.INTERMEDIATE
    assert categorize(31, CONFIG) is Category.OLD


def test_future_dates_are_recent() -> None:
    assert categorize(-3, CONFIG) is Category.RECENT
    assert evaluate("2024-04-02", CONFIG, NOW).category is Category.RECENT


def test_invalid_calendar_date_falls_back_to_old_without_label() -> None:
    evaluation = evaluate("2024-02-30", CONFIG, NOW)
    assert evaluation.category is None
    assert evaluation.colors == OLD
    assert evaluation.label == ""
    assert classify("2024-02-30", CONFIG, NOW) == OLD
    assert relative_label("2024-02-30", NOW) == ""


def test_days_since_truncates_toward_zero() -> None:
    assert days_since(date(2024, 3, 29), datetime(2024, 3, 30, 12)) == 1
    assert days_since(date(2024, 3, 29), datetime(2024, 3, 30, 23, 59)) == 1
    assert days_since(date(2024, 3, 30), datetime(2024, 3, 30, 23, 59)) == 0
    assert days_since(date(2024, 4, 2), datetime(2024, 3, 30)) == -3
    # 36 hours in the future is one day ahead, not two.
    assert days_since(date(2024, 3, 31), datetime(2024, 3, 29, 12)) == -1


def test_days_since_accepts_plain_dates_and_aware_datetimes() -> None:
    assert days_since(date(2024, 3, 10), date(2024, 3, 30)) == 20
    aware = datetime(2024, 3, 30, 6, tzinfo=timezone.utc)
    assert days_since(date(2024, 2, 1), aware) == 58


@pytest.mark.parametrize(
    "days, label",
    [
        (0, "Today"),
        (1, "Yesterday"),
        (-1, "Tomorrow"),
        (5, "5 days ago"),
        (-5, "In 5 days"),
    ],
)
def test_format_relative(days: int, label: str) -> None:
    assert format_relative(days) == label


def test_relative_label_from_raw_text() -> None:
    assert relative_label("2024-03-30", NOW) == "Today"
    assert relative_label("03/29/2024", NOW) == "Yesterday"
    assert relative_label("31-03-2024", NOW) == "Tomorrow"
    assert relative_label("2024.03.10", NOW) == "20 days ago"
    assert relative_label("2024-04-04", NOW) == "In 5 days"


def test_colors_follow_configuration() -> None:
    config = HighlightConfig(recent_color="#111111", text_color="#ffffff")
    assert classify("2024-03-29", config, NOW) == ColorPair(background="#111111", text="#ffffff")


def test_violated_threshold_invariant_still_buckets() -> None:
    config = HighlightConfig(recent_days=30, intermediate_days=10)
    assert not config.thresholds_valid
    assert categorize(20, config) is Category.RECENT
    assert categorize(40, config) is Category.OLD
