"""Read-only document pane built on the Textual line API."""

from __future__ import annotations

from typing import Optional

from rich.cells import cell_len
from textual.geometry import Size
from textual.message import Message
from textual.scroll_view import ScrollView
from textual.strip import Strip

from date_highlighter.adapters.rich_marks import highlight_text
from date_highlighter.core.models import InlineMark, VisibleRange
from date_highlighter.core.processor import InlineDecorations


class DocumentView(ScrollView):
    """Document pane that only highlights the lines inside the viewport.

    Satisfies the core EditorViewPort: ``visible_ranges`` reports the lines
    currently on screen as one absolute character range. Marks are rebuilt
    when the document is replaced or the scroll window moves, never per line.
    """

    class VisibleDatesChanged(Message):
        """Posted after a rebuild with (date text, tooltip) pairs on screen."""

        def __init__(self, dates: list[tuple[str, str]]) -> None:
            super().__init__()
            self.dates = dates

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._text = ""
        self._lines: list[str] = []
        self._line_starts: list[int] = []
        self._decorations: Optional[InlineDecorations] = None
        self._marks: list[InlineMark] = []
        self._window: Optional[tuple[int, int]] = None

    @property
    def marks(self) -> list[InlineMark]:
        return list(self._marks)

    def attach(self, decorations: InlineDecorations) -> None:
        self._decorations = decorations
        self.reload_marks()

    def set_document(self, text: str) -> None:
        """Replace the document and rebuild its marks."""

        self._text = text.replace("\r\n", "\n")
        self._lines = self._text.split("\n")
        self._line_starts = []
        offset = 0
        for line in self._lines:
            self._line_starts.append(offset)
            offset += len(line) + 1
        width = max((cell_len(line) for line in self._lines), default=0)
        self.virtual_size = Size(width, len(self._lines))
        self.scroll_home(animate=False)
        self._window = self._current_window()
        if self._decorations is not None:
            self._decorations.update(doc_changed=True)
        self.reload_marks()

    def reload_marks(self) -> None:
        """Pick up marks rebuilt outside the view (e.g. after a settings save)."""

        if self._decorations is not None:
            self._marks = self._decorations.marks
        self.post_message(self.VisibleDatesChanged(self._visible_dates()))
        self.refresh()

    def visible_ranges(self) -> list[VisibleRange]:
        top, height = self._current_window()
        first = min(top, len(self._lines))
        last = min(top + height, len(self._lines))
        if first >= last:
            return []
        start = self._line_starts[first]
        end = self._line_starts[last - 1] + len(self._lines[last - 1])
        return [VisibleRange(start=start, end=end, text=self._text[start:end])]

    def _current_window(self) -> tuple[int, int]:
        return int(self.scroll_offset.y), self.size.height

    def _sync_window(self) -> None:
        window = self._current_window()
        if window == self._window:
            return
        self._window = window
        if self._decorations is not None and self._decorations.update(viewport_changed=True):
            self._marks = self._decorations.marks
            self.post_message(self.VisibleDatesChanged(self._visible_dates()))

    def _visible_dates(self) -> list[tuple[str, str]]:
        return [(self._text[mark.start : mark.end], mark.tooltip) for mark in self._marks]

    def render_line(self, y: int) -> Strip:
        self._sync_window()
        scroll_x, scroll_y = self.scroll_offset
        index = scroll_y + y
        width = self.size.width
        if index >= len(self._lines):
            return Strip.blank(width, self.rich_style)

        line = highlight_text(self._lines[index], self._marks, self._line_starts[index])
        strip = Strip(list(line.render(self.app.console)), line.cell_len)
        return strip.crop(scroll_x, scroll_x + width).extend_cell_length(width, self.rich_style)
