"""Local directory adapter.

Implements the core FileListingPort over a directory tree and raises rename
notifications for renames done through it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Union

LOGGER = logging.getLogger(__name__)

RenameListener = Callable[[str, str], None]


class LocalVault:
    """A directory of notes addressed by relative POSIX paths."""

    def __init__(self, root: Union[str, Path]) -> None:
        self._root = Path(root).expanduser().resolve()
        # Fail fast so the UI does not start on an empty listing by mistake.
        if not self._root.is_dir():
            raise RuntimeError(f"Vault directory not found: {self._root}")
        self._listeners: List[RenameListener] = []

    @property
    def root(self) -> Path:
        return self._root

    def on_rename(self, listener: RenameListener) -> None:
        self._listeners.append(listener)

    def list_files(self) -> list[str]:
        """Return every file below the root, skipping hidden entries."""

        files: list[str] = []
        for path in self._root.rglob("*"):
            relative = path.relative_to(self._root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if path.is_file():
                files.append(relative.as_posix())
        return sorted(files)

    def resolve(self, path: str) -> Path:
        full = (self._root / path).resolve()
        if self._root not in full.parents:
            raise ValueError(f"Path escapes the vault: {path}")
        return full

    def read_text(self, path: str) -> str:
        return self.resolve(path).read_text(encoding="utf-8", errors="replace")

    def rename(self, old_path: str, new_path: str) -> None:
        """Move a file inside the vault and notify the rename listeners."""

        source = self.resolve(old_path)
        target = self.resolve(new_path)
        if target.exists():
            raise FileExistsError(f"Target already exists: {new_path}")
        target.parent.mkdir(parents=True, exist_ok=True)
        source.rename(target)
        LOGGER.info("Renamed %s -> %s", old_path, new_path)
        for listener in self._listeners:
            listener(old_path, new_path)
