from __future__ import annotations

from pathlib import Path

import pytest

from date_highlighter.adapters.local_vault import LocalVault


def _vault(tmp_path: Path) -> LocalVault:
    (tmp_path / "daily").mkdir()
    (tmp_path / "daily" / "2024-03-29.md").write_text("standup", encoding="utf-8")
    (tmp_path / "ideas.md").write_text("see 2024-01-01", encoding="utf-8")
    (tmp_path / ".obsidian").mkdir()
    (tmp_path / ".obsidian" / "app.json").write_text("{}", encoding="utf-8")
    return LocalVault(tmp_path)


def test_missing_directory_fails_fast(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError):
        LocalVault(tmp_path / "nope")


def test_list_files_skips_hidden_entries(tmp_path: Path) -> None:
    assert _vault(tmp_path).list_files() == ["daily/2024-03-29.md", "ideas.md"]


def test_rename_moves_file_and_notifies(tmp_path: Path) -> None:
    vault = _vault(tmp_path)
    events: list[tuple[str, str]] = []
    vault.on_rename(lambda old, new: events.append((old, new)))

    vault.rename("ideas.md", "archive/ideas 2024-01-01.md")

    assert events == [("ideas.md", "archive/ideas 2024-01-01.md")]
    assert "archive/ideas 2024-01-01.md" in vault.list_files()
    assert vault.read_text("archive/ideas 2024-01-01.md") == "see 2024-01-01"


def test_rename_refuses_existing_target(tmp_path: Path) -> None:
    vault = _vault(tmp_path)
    events: list[tuple[str, str]] = []
    vault.on_rename(lambda old, new: events.append((old, new)))

    with pytest.raises(FileExistsError):
        vault.rename("ideas.md", "daily/2024-03-29.md")
    assert events == []


def test_paths_outside_the_vault_are_rejected(tmp_path: Path) -> None:
    vault = _vault(tmp_path)
    with pytest.raises(ValueError):
        vault.read_text("../outside.md")
