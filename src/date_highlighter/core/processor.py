"""Core highlighting orchestration.

This module is host-agnostic. It decides when a pass has to run again and
hands results to the ports, enabling different editors or file explorers
without changes here.
"""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Callable, List

from date_highlighter.core.classifier import Moment
from date_highlighter.core.config import HighlightConfig
from date_highlighter.core.highlighter import highlight_filenames, highlight_visible, to_inline_marks
from date_highlighter.core.models import InlineMark
from date_highlighter.core.ports import EditorViewPort, FileListingPort, FileStylePort, SettingsStorePort

LOGGER = logging.getLogger(__name__)

ConfigProvider = Callable[[], HighlightConfig]
Clock = Callable[[], Moment]


class InlineDecorations:
    """Mark set of one editor view, rebuilt only when its view changes."""

    def __init__(
        self,
        view: EditorViewPort,
        config_provider: ConfigProvider,
        clock: Clock = datetime.now,
    ) -> None:
        self._view = view
        self._config_provider = config_provider
        self._clock = clock
        self._marks: List[InlineMark] = []
        self.refresh()

    @property
    def marks(self) -> List[InlineMark]:
        return list(self._marks)

    def update(self, *, doc_changed: bool = False, viewport_changed: bool = False) -> bool:
        """Rebuild when the document or the visible window changed.

        Returns True when the marks were rebuilt.
        """

        if not (doc_changed or viewport_changed):
            return False
        self.refresh()
        return True

    def refresh(self) -> None:
        """Rebuild unconditionally, e.g. after the settings were saved."""

        results = highlight_visible(self._view.visible_ranges(), self._config_provider(), self._clock())
        # Hosts expect decorations sorted by position; the pass yields them per pattern.
        self._marks = sorted(to_inline_marks(results), key=lambda mark: (mark.start, mark.end))
        LOGGER.debug("Inline decorations rebuilt: %s marks", len(self._marks))


class FilenameStyles:
    """Rebuilds filename highlighting for every file in one pass."""

    def __init__(
        self,
        files: FileListingPort,
        styles: FileStylePort,
        config_provider: ConfigProvider,
        clock: Clock = datetime.now,
    ) -> None:
        self._files = files
        self._styles = styles
        self._config_provider = config_provider
        self._clock = clock

    def rebuild(self) -> int:
        """Recompute the whole mapping and hand it to the style port.

        Returns the number of highlighted files.
        """

        config = self._config_provider()
        if not config.highlight_filenames:
            self._styles.apply({})
            return 0

        results = highlight_filenames(self._files.list_files(), config, self._clock())
        self._styles.apply(results)
        LOGGER.debug("Filename styles rebuilt: %s files", len(results))
        return len(results)


class DateHighlighter:
    """Wires settings, open views, and filename styles together.

    Mirrors the lifecycle of an editor plugin: settings are loaded once,
    filename styles are rebuilt on startup, on rename and on save, and every
    open view is refreshed after a save.
    """

    def __init__(
        self,
        store: SettingsStorePort,
        files: FileListingPort,
        styles: FileStylePort,
        clock: Clock = datetime.now,
    ) -> None:
        self._store = store
        self._clock = clock
        self.config = store.load()
        self._views: List[InlineDecorations] = []
        self._filename_styles = FilenameStyles(files, styles, self._current_config, clock)
        self._filename_styles.rebuild()

    def _current_config(self) -> HighlightConfig:
        return self.config

    def register_view(self, view: EditorViewPort) -> InlineDecorations:
        decorations = InlineDecorations(view, self._current_config, self._clock)
        self._views.append(decorations)
        return decorations

    def unregister_view(self, decorations: InlineDecorations) -> None:
        if decorations in self._views:
            self._views.remove(decorations)

    def on_rename(self, old_path: str, new_path: str) -> None:
        LOGGER.info("File renamed %s -> %s", old_path, new_path)
        self._filename_styles.rebuild()

    def save_settings(self, config: HighlightConfig) -> None:
        """Persist ``config`` and re-run every pass with it."""

        self._store.save(config)
        self.config = config
        self._filename_styles.rebuild()
        for decorations in self._views:
            decorations.refresh()
        LOGGER.info("Settings saved; refreshed %s views", len(self._views))
