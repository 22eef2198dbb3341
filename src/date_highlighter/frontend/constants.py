"""Shared constants for the Textual UI."""

from __future__ import annotations

ACCENT_GREEN = "#a4e7c3"
APP_TITLE = "DATE HIGHLIGHTER"
