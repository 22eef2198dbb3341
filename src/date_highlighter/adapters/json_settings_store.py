"""JSON settings adapter.

Implements the core SettingsStorePort with a single JSON file using the
camelCase keys of the editor plugin's data.json, so one file can serve both.
Missing or unreadable data falls back to the defaults field by field.
"""

from __future__ import annotations

from dataclasses import asdict
import json
import logging
from pathlib import Path
from typing import Any, Union

from date_highlighter.core.config import HighlightConfig

LOGGER = logging.getLogger(__name__)

# Persisted key -> HighlightConfig field.
FIELD_KEYS = {
    "highlightInlineContent": "highlight_inline_content",
    "highlightFilenames": "highlight_filenames",
    "recentColor": "recent_color",
    "intermediateColor": "intermediate_color",
    "oldColor": "old_color",
    "recentDays": "recent_days",
    "intermediateDays": "intermediate_days",
    "textColor": "text_color",
}


def _coerce(field_name: str, value: Any, default: Any) -> Any:
    """Return ``value`` if it has the same type as ``default``, else ``default``."""

    if isinstance(default, bool):
        ok = isinstance(value, bool)
    elif isinstance(default, int):
        # bool is an int subclass; "true" is not a day count.
        ok = isinstance(value, int) and not isinstance(value, bool) and value >= 0
    else:
        ok = isinstance(value, str) and bool(value.strip())
    if ok:
        return value
    LOGGER.warning("Invalid value for %s: %r, using default %r", field_name, value, default)
    return default


def config_from_dict(raw: dict[str, Any]) -> HighlightConfig:
    """Merge persisted data over the defaults."""

    defaults = HighlightConfig()
    values: dict[str, Any] = {}
    for key, value in raw.items():
        field_name = FIELD_KEYS.get(key)
        if field_name is None:
            LOGGER.debug("Ignoring unknown settings key %s", key)
            continue
        values[field_name] = _coerce(field_name, value, getattr(defaults, field_name))

    config = HighlightConfig(**values)
    if not config.thresholds_valid:
        LOGGER.warning(
            "intermediateDays (%s) should be greater than recentDays (%s)",
            config.intermediate_days,
            config.recent_days,
        )
    return config


def config_to_dict(config: HighlightConfig) -> dict[str, Any]:
    values = asdict(config)
    return {key: values[field_name] for key, field_name in FIELD_KEYS.items()}


class JsonSettingsStore:
    """Thin JSON wrapper that satisfies the SettingsStorePort contract."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> HighlightConfig:
        """Load settings, filling anything missing from the defaults."""

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            LOGGER.info("Settings file %s not found, using defaults", self._path)
            return HighlightConfig()
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.error("Cannot read settings file %s (%s), using defaults", self._path, exc)
            return HighlightConfig()
        except json.JSONDecodeError as exc:
            LOGGER.error("Settings file %s is not valid JSON (%s), using defaults", self._path, exc.msg)
            return HighlightConfig()

        if not isinstance(raw, dict):
            LOGGER.error("Settings root in %s must be an object, using defaults", self._path)
            return HighlightConfig()
        return config_from_dict(raw)

    def save(self, config: HighlightConfig) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(config_to_dict(config), indent=2, ensure_ascii=True) + "\n",
            encoding="utf-8",
        )
        LOGGER.info("Settings saved to %s", self._path)
