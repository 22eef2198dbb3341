"""Highlight settings as the passes read them.

Reading and validating the stored JSON happens in the adapters and the
settings screen; this module only holds the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_RECENT_COLOR = "#a4e7c3"
DEFAULT_INTERMEDIATE_COLOR = "#e7dba4"
DEFAULT_OLD_COLOR = "#e7a4a4"
DEFAULT_TEXT_COLOR = "#000000"
DEFAULT_RECENT_DAYS = 14
DEFAULT_INTERMEDIATE_DAYS = 30


@dataclass(frozen=True)
class HighlightConfig:
    """Color mapping, age thresholds, and the two highlighting switches.

    The core assumes ``intermediate_days > recent_days``. Validation of that
    invariant belongs to whoever edits the settings; with a violating config
    the intermediate bucket simply becomes unreachable.
    """

    highlight_inline_content: bool = True
    highlight_filenames: bool = True
    recent_color: str = DEFAULT_RECENT_COLOR
    intermediate_color: str = DEFAULT_INTERMEDIATE_COLOR
    old_color: str = DEFAULT_OLD_COLOR
    text_color: str = DEFAULT_TEXT_COLOR
    recent_days: int = DEFAULT_RECENT_DAYS
    intermediate_days: int = DEFAULT_INTERMEDIATE_DAYS

    @property
    def thresholds_valid(self) -> bool:
        return self.intermediate_days > self.recent_days
