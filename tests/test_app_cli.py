from __future__ import annotations

import json
from pathlib import Path

import pytest

from date_highlighter import settings
from date_highlighter.adapters.stylesheet import css_escape
from date_highlighter.app import main


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "LOG_FILE", "")
    monkeypatch.setattr(settings, "LOG_CONSOLE", False)


def _vault(tmp_path: Path) -> Path:
    vault = tmp_path / "vault"
    vault.mkdir()
    (vault / "2020-01-01 kickoff.md").write_text("first meeting", encoding="utf-8")
    (vault / "ideas.md").write_text("no dates here", encoding="utf-8")
    return vault


def _filenames_off(tmp_path: Path) -> Path:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"highlightFilenames": False}), encoding="utf-8")
    return path


def test_css_prints_one_rule_per_dated_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["css", str(_vault(tmp_path)), "--config", str(tmp_path / "missing.json")])

    out = capsys.readouterr().out
    assert out.count(".nav-file-title[data-path=") == 1
    assert f'data-path="{css_escape("2020-01-01 kickoff.md")}"' in out
    assert "background-color: #e7a4a4 !important;" in out


def test_css_writes_output_file_instead_of_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "out" / "dates.css"
    main(["--config", str(tmp_path / "missing.json"), "css", str(_vault(tmp_path)), "-o", str(output)])

    assert capsys.readouterr().out == ""
    assert css_escape("2020-01-01 kickoff.md") in output.read_text(encoding="utf-8")


@pytest.mark.parametrize("config_after_command", [True, False])
def test_config_option_is_accepted_on_either_side_of_the_command(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], config_after_command: bool
) -> None:
    vault = str(_vault(tmp_path))
    config = str(_filenames_off(tmp_path))
    argv = ["css", vault, "--config", config] if config_after_command else ["--config", config, "css", vault]

    main(argv)

    assert capsys.readouterr().out == ""


def test_scan_prints_text_and_date_table(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    note = tmp_path / "note.md"
    note.write_text("kickoff 2020-01-01, typo 2023-02-30", encoding="utf-8")

    main(["scan", str(note), "--config", str(tmp_path / "missing.json")])

    out = capsys.readouterr().out
    assert "kickoff 2020-01-01, typo 2023-02-30" in out
    assert "days ago" in out
    assert "invalid date" in out
