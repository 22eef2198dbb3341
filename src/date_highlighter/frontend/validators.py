"""Validation helpers for settings editing."""

from __future__ import annotations

from dataclasses import dataclass
import re

from date_highlighter.core.config import HighlightConfig

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


@dataclass
class FieldValue:
    value: int | str | None
    error: str | None = None


def parse_recent_days(raw_value: str) -> FieldValue:
    days = _parse_int(raw_value)
    if days is None or days <= 0:
        return FieldValue(None, "recent days must be a positive whole number")
    return FieldValue(days)


def parse_intermediate_days(raw_value: str, recent_days: int) -> FieldValue:
    days = _parse_int(raw_value)
    if days is None:
        return FieldValue(None, "intermediate days must be a whole number")
    if days <= recent_days:
        return FieldValue(None, f"intermediate days must be greater than recent days ({recent_days})")
    return FieldValue(days)


def parse_color(raw_value: str, name: str) -> FieldValue:
    value = raw_value.strip()
    if not _HEX_COLOR.fullmatch(value):
        return FieldValue(None, f"{name} must be a hex color like #a4e7c3")
    return FieldValue(value.lower())


def build_config(
    *,
    highlight_inline_content: bool,
    highlight_filenames: bool,
    recent_days: str,
    intermediate_days: str,
    recent_color: str,
    intermediate_color: str,
    old_color: str,
    text_color: str,
) -> tuple[HighlightConfig | None, str | None]:
    """Validate raw form values; return the config or the first error."""

    recent = parse_recent_days(recent_days)
    if recent.error:
        return None, recent.error
    intermediate = parse_intermediate_days(intermediate_days, int(recent.value))
    if intermediate.error:
        return None, intermediate.error

    colors: dict[str, str] = {}
    for name, raw in (
        ("recent color", recent_color),
        ("intermediate color", intermediate_color),
        ("old color", old_color),
        ("text color", text_color),
    ):
        parsed = parse_color(raw, name)
        if parsed.error:
            return None, parsed.error
        colors[name] = str(parsed.value)

    return (
        HighlightConfig(
            highlight_inline_content=highlight_inline_content,
            highlight_filenames=highlight_filenames,
            recent_color=colors["recent color"],
            intermediate_color=colors["intermediate color"],
            old_color=colors["old color"],
            text_color=colors["text color"],
            recent_days=int(recent.value),
            intermediate_days=int(intermediate.value),
        ),
        None,
    )


def _parse_int(value: str) -> int | None:
    try:
        return int(value.strip())
    except ValueError:
        return None
