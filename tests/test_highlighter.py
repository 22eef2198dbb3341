from __future__ import annotations

from datetime import datetime

from date_highlighter.core.config import HighlightConfig
from date_highlighter.core.highlighter import highlight_filenames, highlight_visible, to_inline_marks
from date_highlighter.core.models import VisibleRange

NOW = datetime(2024, 3, 30, 9, 0)
CONFIG = HighlightConfig()


def test_visible_results_use_absolute_offsets() -> None:
    ranges = [
        VisibleRange(start=100, end=125, text="meeting on 2024-03-29 ok"),
        VisibleRange(start=400, end=420, text="old: 01-02-2024"),
    ]
    results = highlight_visible(ranges, CONFIG, NOW)

    assert [(r.start, r.end, r.text) for r in results] == [
        (111, 121, "2024-03-29"),
        (405, 415, "01-02-2024"),
    ]
    assert results[0].colors.background == CONFIG.recent_color
    assert results[0].label == "Yesterday"
    assert results[1].colors.background == CONFIG.old_color
    assert results[1].label == "58 days ago"


def test_unparsable_match_is_highlighted_as_old() -> None:
    (result,) = highlight_visible([VisibleRange(0, 10, "2024-02-30")], CONFIG, NOW)
    assert result.colors.background == CONFIG.old_color
    assert result.label == ""


def test_visible_pass_is_idempotent() -> None:
    ranges = [VisibleRange(start=0, end=40, text="2024-03-29, 03/01/2024, 2024.01.01")]
    assert highlight_visible(ranges, CONFIG, NOW) == highlight_visible(ranges, CONFIG, NOW)


def test_visible_pass_disabled_returns_nothing() -> None:
    config = HighlightConfig(highlight_inline_content=False)
    assert highlight_visible([VisibleRange(0, 10, "2024-03-29")], config, NOW) == []


def test_visible_pass_reads_clock_when_now_missing() -> None:
    (result,) = highlight_visible([VisibleRange(0, 10, "2999-01-01")], CONFIG)
    assert result.label.startswith("In ")


def test_filename_pass_keeps_first_match_only() -> None:
    results = highlight_filenames(
        ["journal/2024-03-29 to 2024-01-01.md", "notes/readme.md"],
        CONFIG,
        NOW,
    )

    assert list(results) == ["journal/2024-03-29 to 2024-01-01.md"]
    result = results["journal/2024-03-29 to 2024-01-01.md"]
    assert result.text == "2024-03-29"
    assert (result.start, result.end) == (0, 10)
    assert result.colors.background == CONFIG.recent_color


def test_filename_pass_scans_name_not_folders() -> None:
    results = highlight_filenames(["2024-03-29/plan.md", "archive/plan 2024-02-01.md"], CONFIG, NOW)
    assert list(results) == ["archive/plan 2024-02-01.md"]
    assert results["archive/plan 2024-02-01.md"].colors.background == CONFIG.old_color


def test_filename_pass_disabled_returns_empty_mapping() -> None:
    config = HighlightConfig(highlight_filenames=False)
    assert highlight_filenames(["2024-03-29.md"], config, NOW) == {}


def test_inline_marks_carry_style_and_tooltip() -> None:
    results = highlight_visible([VisibleRange(10, 20, "2024-03-10")], CONFIG, NOW)
    (mark,) = to_inline_marks(results)
    assert (mark.start, mark.end) == (10, 20)
    assert mark.tooltip == "20 days ago"
    assert mark.style == f"background-color: {CONFIG.intermediate_color}; color: {CONFIG.text_color};"
