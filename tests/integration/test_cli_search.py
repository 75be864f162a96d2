"""Integration tests for the search CLI command.

These tests run the command against real files in a temporary tree, once
with the asyncio explorer and once with the blocking one.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from confseek.cli import app


if TYPE_CHECKING:
    from pathlib import Path


runner = CliRunner()

ENGINE_FLAGS = [pytest.param([], id="async"), pytest.param(["--sync"], id="sync")]


@pytest.mark.cli
@pytest.mark.tier(1)
class TestSearchCommand:
    """Integration tests for the search command."""

    @pytest.mark.parametrize("engine_flags", ENGINE_FLAGS)
    def test_search_prints_found_config(
        self, tmp_path: Path, engine_flags: list[str]
    ) -> None:
        """A config found above the start directory is printed as JSON."""
        (tmp_path / ".demorc.json").write_text(json.dumps({"port": 8080}))
        start = tmp_path / "src" / "pkg"
        start.mkdir(parents=True)

        result = runner.invoke(
            app,
            ["search", "demo", "--from", str(start), "--stop-dir", str(tmp_path)]
            + engine_flags,
        )

        assert result.exit_code == 0, result.output
        assert f"Found: {tmp_path / '.demorc.json'}" in result.output
        assert '"port": 8080' in result.output

    @pytest.mark.parametrize("engine_flags", ENGINE_FLAGS)
    def test_search_not_found_exits_1(
        self, tmp_path: Path, engine_flags: list[str]
    ) -> None:
        """Nothing found prints a notice and exits with code 1."""
        result = runner.invoke(
            app,
            ["search", "demo", "--from", str(tmp_path), "--stop-dir", str(tmp_path)]
            + engine_flags,
        )

        assert result.exit_code == 1
        assert "No configuration found for 'demo'." in result.output

    def test_search_defaults_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without --from the search starts in the working directory."""
        (tmp_path / ".demorc.yaml").write_text("name: cwd\n")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["search", "demo", "--stop-dir", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert '"name": "cwd"' in result.output

    def test_search_with_custom_places(self, tmp_path: Path) -> None:
        """--place replaces the default search places, in order."""
        (tmp_path / ".demorc.json").write_text(json.dumps({"from": "rc"}))
        (tmp_path / "demo.json").write_text(json.dumps({"from": "custom"}))

        result = runner.invoke(
            app,
            [
                "search",
                "demo",
                "--from",
                str(tmp_path),
                "--stop-dir",
                str(tmp_path),
                "--place",
                "demo.json",
                "--place",
                ".demorc.json",
            ],
        )

        assert result.exit_code == 0, result.output
        assert '"from": "custom"' in result.output

    def test_search_stop_on_empty(self, tmp_path: Path) -> None:
        """--stop-on-empty reports a blank config file."""
        (tmp_path / ".demorc.json").write_text("   \n")

        result = runner.invoke(
            app,
            [
                "search",
                "demo",
                "--from",
                str(tmp_path),
                "--stop-dir",
                str(tmp_path),
                "--stop-on-empty",
            ],
        )

        assert result.exit_code == 0, result.output
        assert f"Empty config file: {tmp_path / '.demorc.json'}" in result.output

    def test_search_xdg_fallback(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """--xdg falls back to $XDG_CONFIG_HOME/<module>/."""
        xdg_home = tmp_path / "xdg"
        (xdg_home / "demo").mkdir(parents=True)
        (xdg_home / "demo" / "config.json").write_text(json.dumps({"from": "xdg"}))
        project = tmp_path / "project"
        project.mkdir()
        monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg_home))

        result = runner.invoke(
            app,
            ["search", "demo", "--from", str(project), "--stop-dir", str(project)]
            + ["--xdg"],
        )

        assert result.exit_code == 0, result.output
        assert '"from": "xdg"' in result.output

    @pytest.mark.parametrize("engine_flags", ENGINE_FLAGS)
    def test_search_parse_error_shows_hint(
        self, tmp_path: Path, engine_flags: list[str]
    ) -> None:
        """Loader failures print Error: and Hint: lines and exit 1."""
        (tmp_path / ".demorc.json").write_text('{"port": }')

        result = runner.invoke(
            app,
            ["search", "demo", "--from", str(tmp_path), "--stop-dir", str(tmp_path)]
            + engine_flags,
        )

        assert result.exit_code == 1
        assert "Error: JSON Error in" in result.output
        assert "Hint: Check .demorc.json at line 1" in result.output

    def test_search_missing_loader_is_error(self, tmp_path: Path) -> None:
        """A matched place with no loader is reported as an error."""
        (tmp_path / "demo.ini").write_text("[demo]\n")

        result = runner.invoke(
            app,
            [
                "search",
                "demo",
                "--from",
                str(tmp_path),
                "--stop-dir",
                str(tmp_path),
                "--place",
                "demo.ini",
            ],
        )

        assert result.exit_code == 1
        assert "No loader specified for extension '.ini'" in result.output
