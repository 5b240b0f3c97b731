"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from catalogtree.cli import main


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep main() from attaching handlers to the captured stderr."""
    monkeypatch.setattr("catalogtree.cli.configure_logging", lambda level=None: None)


@pytest.fixture
def catalog_file(tmp_path: Path, sample_catalog: str) -> Path:
    path = tmp_path / "catalog.idw"
    path.write_text(sample_catalog, encoding="utf-8")
    return path


class TestMain:
    """Tests for the catalogtree entry point."""

    def test_prints_outline_by_default(self, catalog_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(catalog_file)]) == 0

        out = capsys.readouterr().out
        assert out.splitlines()[0] == "Section"
        assert "  item1 <http://a>" in out

    def test_json_format(self, catalog_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(catalog_file), "--format", "json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [node["tokens"][0]["text"] for node in data] == ["Section", "Other"]

    def test_query_filters_output(self, catalog_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(catalog_file), "--query", "secret"]) == 0

        out = capsys.readouterr().out
        assert "nested detail" in out
        assert "Other root" not in out

    def test_show_diagnostics(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "catalog.idw"
        path.write_text("a b @t(kw)\n", encoding="utf-8")

        assert main([str(path), "--show-diagnostics"]) == 0

        assert "line 1: @t count (1) != tokens (2)" in capsys.readouterr().err

    def test_missing_file_exits_with_error(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "absent.idw")]) == 1

    def test_rejects_unknown_format(self, catalog_file: Path) -> None:
        with pytest.raises(SystemExit):
            main([str(catalog_file), "--format", "pdf"])
