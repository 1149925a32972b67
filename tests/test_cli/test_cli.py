"""Tests for the unused-css CLI commands."""
from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from unused_css import __version__
from unused_css.cli.main import cli


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    (tmp_path / "index.html").write_text(
        '<div class="a"><p ng-class="{\'highlight\': on}"></p></div>', encoding="utf-8"
    )
    (tmp_path / "clean.css").write_text(".a {} .highlight {}", encoding="utf-8")
    (tmp_path / "unused.css").write_text(".a{} .b{}", encoding="utf-8")
    (tmp_path / "broken.css").write_text(".a {", encoding="utf-8")
    return tmp_path


def _check(project: Path, *stylesheets: str, extra: tuple[str, ...] = ()):
    runner = CliRunner()
    args = ["check", *(str(project / s) for s in stylesheets), "--files", str(project / "*.html"), *extra]
    return runner.invoke(cli, args)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "check" in result.output
        assert "used" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_clean_stylesheet(self, project: Path) -> None:
        result = _check(project, "clean.css")
        assert result.exit_code == 0
        assert f"OK: {project / 'clean.css'}" in result.output

    def test_unused_classes_fail(self, project: Path) -> None:
        result = _check(project, "unused.css")
        assert result.exit_code == 1
        assert "Unused CSS classes" in result.output
        assert str(project / "unused.css") in result.output

    def test_stops_at_first_failure(self, project: Path) -> None:
        result = _check(project, "unused.css", "clean.css")
        assert result.exit_code == 1
        assert "OK:" not in result.output

    def test_ignore_literal(self, project: Path) -> None:
        result = _check(project, "unused.css", extra=("--ignore", "b"))
        assert result.exit_code == 0

    def test_ignore_pattern(self, project: Path) -> None:
        result = _check(project, "unused.css", extra=("--ignore-pattern", "^b$"))
        assert result.exit_code == 0

    def test_invalid_ignore_pattern(self, project: Path) -> None:
        result = _check(project, "unused.css", extra=("--ignore-pattern", "("))
        assert result.exit_code == 2

    def test_no_angular(self, project: Path) -> None:
        result = _check(project, "clean.css", extra=("--no-angular",))
        assert result.exit_code == 1
        assert "highlight" in result.output

    def test_end_mode_stops_quietly(self, project: Path) -> None:
        result = _check(project, "unused.css", "clean.css", extra=("--end",))
        assert result.exit_code == 0
        assert "OK:" not in result.output

    def test_parse_error(self, project: Path) -> None:
        result = _check(project, "broken.css")
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_parse_error_end_mode_passes(self, project: Path) -> None:
        result = _check(project, "broken.css", extra=("--end",))
        assert result.exit_code == 0
        assert "OK:" in result.output

    def test_files_required(self, project: Path) -> None:
        result = CliRunner().invoke(cli, ["check", str(project / "clean.css")])
        assert result.exit_code == 2
        assert "--files" in result.output

    def test_verbose_reports_collection(self, project: Path) -> None:
        result = _check(project, "clean.css", extra=("--verbose",))
        assert result.exit_code == 0
        assert "Collected" in result.output


# ---------------------------------------------------------------------------
# used command
# ---------------------------------------------------------------------------


class TestUsedCommand:
    def test_lists_sorted_classes(self, project: Path) -> None:
        result = CliRunner().invoke(cli, ["used", "--files", str(project / "*.html")])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["a", "highlight"]

    def test_no_angular(self, project: Path) -> None:
        result = CliRunner().invoke(
            cli, ["used", "--files", str(project / "*.html"), "--no-angular"]
        )
        assert result.output.splitlines() == ["a"]
