"""Main Textual app: file list, highlighted document, and settings."""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Any

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Footer, OptionList, Static
from textual.widgets.option_list import Option

from date_highlighter.adapters.json_settings_store import JsonSettingsStore
from date_highlighter.adapters.local_vault import LocalVault
from date_highlighter.adapters.rich_marks import filename_label
from date_highlighter.adapters.stylesheet import CssStyleSheet
from date_highlighter.core.config import HighlightConfig
from date_highlighter.core.processor import Clock, DateHighlighter

from .constants import ACCENT_GREEN, APP_TITLE
from .document_view import DocumentView
from .modals import RenameScreen, SettingsScreen

LOGGER = logging.getLogger(__name__)


class HighlighterApp(App):
    """Browse a vault with dates highlighted in file names and content."""

    TITLE = APP_TITLE

    CSS = """
    Screen {
        background: #14181c;
        color: #e8eef5;
    }

    #header {
        height: 3;
        padding: 0 2;
        border-bottom: solid #2a3a46;
    }

    #title {
        text-style: bold;
    }

    .subtle {
        color: #9aa7b3;
    }

    #body {
        height: 1fr;
    }

    #document-pane {
        width: 1fr;
        height: 1fr;
    }

    #files {
        height: 1fr;
        width: 36;
        border-right: solid #2a3a46;
    }

    #document {
        height: 1fr;
    }

    #visible-dates {
        height: 1;
        padding: 0 1;
        color: #9aa7b3;
    }

    .modal-dialog {
        width: 60;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        border: round #2a3a46;
        background: #1c2228;
    }

    .modal-title, .modal-section {
        text-style: bold;
        margin-top: 1;
    }

    .modal-error {
        color: #e7a4a4;
    }

    .modal-actions {
        height: 3;
        margin-top: 1;
    }

    ModalScreen {
        align: center middle;
    }
    """

    BINDINGS = [
        ("s", "edit_settings", "Settings"),
        ("n", "rename_file", "Rename"),
        ("r", "reload_document", "Reload"),
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        vault: LocalVault,
        store: JsonSettingsStore,
        styles: CssStyleSheet,
        clock: Clock = datetime.now,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._vault = vault
        self._store = store
        self._styles = styles
        self._clock = clock
        self._highlighter: DateHighlighter | None = None
        self._current_path: str | None = None

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            yield Static(self._title_text(), id="title")
            yield Static("", id="current-file", classes="subtle")
        with Horizontal(id="body"):
            yield OptionList(id="files")
            with Vertical(id="document-pane"):
                yield DocumentView(id="document")
                yield Static("", id="visible-dates")
        yield Footer()

    def on_mount(self) -> None:
        self._highlighter = DateHighlighter(self._store, self._vault, self._styles, self._clock)
        self._vault.on_rename(self._handle_rename)
        view = self.query_one(DocumentView)
        view.attach(self._highlighter.register_view(view))
        self._refresh_file_list()
        files = self._vault.list_files()
        if files:
            self._open(files[0])

    @property
    def config(self) -> HighlightConfig:
        assert self._highlighter is not None
        return self._highlighter.config

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option.id:
            self._open(event.option.id)

    def on_document_view_visible_dates_changed(self, message: DocumentView.VisibleDatesChanged) -> None:
        summary = "  ".join(f"{text} {label}".strip() for text, label in message.dates)
        self.query_one("#visible-dates", Static).update(summary)

    def action_edit_settings(self) -> None:
        self.push_screen(SettingsScreen(self.config), self._apply_settings)

    def action_rename_file(self) -> None:
        if self._current_path is None:
            return
        self.push_screen(RenameScreen(self._current_path), self._rename_current)

    def action_reload_document(self) -> None:
        if self._current_path is not None:
            self._open(self._current_path)

    def _apply_settings(self, config: HighlightConfig | None) -> None:
        if config is None or self._highlighter is None:
            return
        try:
            self._highlighter.save_settings(config)
        except OSError as exc:
            LOGGER.exception("Failed to save settings")
            self.notify(f"save failed: {exc.strerror or exc}", severity="error")
            return
        self.query_one(DocumentView).reload_marks()
        self._refresh_file_list()
        self.notify("Settings saved")

    def _rename_current(self, new_path: str | None) -> None:
        if not new_path or self._current_path is None:
            return
        try:
            self._vault.rename(self._current_path, new_path)
        except (OSError, ValueError) as exc:
            self.notify(str(exc), severity="error")

    def _handle_rename(self, old_path: str, new_path: str) -> None:
        if self._highlighter is not None:
            self._highlighter.on_rename(old_path, new_path)
        if self._current_path == old_path:
            self._current_path = new_path
            self._update_current_label()
        self._refresh_file_list()

    def _open(self, path: str) -> None:
        try:
            text = self._vault.read_text(path)
        except (OSError, ValueError) as exc:
            self.notify(f"cannot open {path}: {exc}", severity="error")
            return
        self._current_path = path
        self._update_current_label()
        self.query_one(DocumentView).set_document(text)

    def _refresh_file_list(self) -> None:
        option_list = self.query_one("#files", OptionList)
        option_list.clear_options()
        option_list.add_options(
            [Option(filename_label(path, self._styles.results.get(path)), id=path) for path in self._vault.list_files()]
        )

    def _update_current_label(self) -> None:
        self.query_one("#current-file", Static).update(self._current_path or "")

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("DATE", ACCENT_GREEN),
            (" HIGHLIGHTER > Vault", "bold"),
        )
