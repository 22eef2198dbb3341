"""Modal dialogs for the Textual highlighter."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, ScrollableContainer
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static, Switch

from date_highlighter.core.config import HighlightConfig

from .validators import build_config


class SettingsScreen(ModalScreen[HighlightConfig | None]):
    """Form for switches, time periods, and colors."""

    def __init__(self, config: HighlightConfig) -> None:
        super().__init__()
        self._config = config

    def compose(self) -> ComposeResult:
        config = self._config
        yield ScrollableContainer(
            Static("Date Highlighter Settings", classes="modal-title"),
            Static("", id="settings-error", classes="modal-error"),
            Static("Highlight inline dates", classes="form-label"),
            Switch(value=config.highlight_inline_content, id="settings-inline"),
            Static("Highlight filenames", classes="form-label"),
            Switch(value=config.highlight_filenames, id="settings-filenames"),
            Static("Time Periods", classes="modal-section"),
            Static("Recent period (days)", classes="form-label"),
            Input(value=str(config.recent_days), id="settings-recent-days"),
            Static("Intermediate period (days)", classes="form-label"),
            Input(value=str(config.intermediate_days), id="settings-intermediate-days"),
            Static("Colors", classes="modal-section"),
            Static("Recent color", classes="form-label"),
            Input(value=config.recent_color, id="settings-recent-color"),
            Static("Intermediate color", classes="form-label"),
            Input(value=config.intermediate_color, id="settings-intermediate-color"),
            Static("Old color", classes="form-label"),
            Input(value=config.old_color, id="settings-old-color"),
            Static("Text color", classes="form-label"),
            Input(value=config.text_color, id="settings-text-color"),
            Horizontal(
                Button("Save", id="settings-save", variant="success"),
                Button("Cancel", id="settings-cancel"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--form",
        )

    def _value(self, selector: str) -> str:
        return self.query_one(selector, Input).value

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "settings-cancel":
            self.dismiss(None)
            return
        if event.button.id != "settings-save":
            return
        config, error = build_config(
            highlight_inline_content=self.query_one("#settings-inline", Switch).value,
            highlight_filenames=self.query_one("#settings-filenames", Switch).value,
            recent_days=self._value("#settings-recent-days"),
            intermediate_days=self._value("#settings-intermediate-days"),
            recent_color=self._value("#settings-recent-color"),
            intermediate_color=self._value("#settings-intermediate-color"),
            old_color=self._value("#settings-old-color"),
            text_color=self._value("#settings-text-color"),
        )
        if error or config is None:
            self.query_one("#settings-error", Static).update(error or "invalid settings")
            return
        self.dismiss(config)


class RenameScreen(ModalScreen[str | None]):
    """Ask for the new vault-relative path of a file."""

    def __init__(self, path: str) -> None:
        super().__init__()
        self._path = path

    def compose(self) -> ComposeResult:
        yield Container(
            Static("Rename file", classes="modal-title"),
            Static(self._path, classes="modal-body"),
            Static("", id="rename-error", classes="modal-error"),
            Input(value=self._path, id="rename-path"),
            Horizontal(
                Button("Rename", id="rename-confirm", variant="warning"),
                Button("Cancel", id="rename-cancel"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--form",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "rename-confirm":
            self.dismiss(None)
            return
        new_path = self.query_one("#rename-path", Input).value.strip()
        if not new_path:
            self.query_one("#rename-error", Static).update("path is required")
            return
        if new_path == self._path:
            self.dismiss(None)
            return
        self.dismiss(new_path)
