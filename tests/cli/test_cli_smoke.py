"""Smoke tests for the CLI - command structure and end-to-end output."""

import json

from libview.infrastructure.cli.app import app


class TestCommandStructure:
    """Commands exist and are accessible."""

    def test_main_help_shows_commands(self, runner):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "show" in result.stdout
        assert "presets" in result.stdout
        assert "version" in result.stdout

    def test_version_command_works(self, runner):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "libview" in result.stdout

    def test_show_help_lists_toggles(self, runner):
        result = runner.invoke(app, ["show", "--help"])

        assert result.exit_code == 0
        assert "--hide-spotify" in result.stdout

    def test_presets_command(self, runner):
        result = runner.invoke(app, ["presets"])

        assert result.exit_code == 0
        for name in ("albums", "artists", "composers", "tracks", "playlists"):
            assert name in result.stdout
        assert "unsorted" in result.stdout


class TestShowCommand:
    """Grouping saved pages from the command line."""

    def test_table_output(self, runner, albums_file):
        result = runner.invoke(app, ["show", str(albums_file), "--hide-spotify"])

        assert result.exit_code == 0
        assert "Bach" in result.stdout
        assert "3 Doors Down" in result.stdout
        assert "bee gees" not in result.stdout
        assert "4 of 5 shown" in result.stdout

    def test_json_output(self, runner, albums_file):
        result = runner.invoke(
            app,
            ["show", str(albums_file), "--hide-spotify", "--format", "json"],
        )

        assert result.exit_code == 0
        document = json.loads(result.stdout)
        assert document["preset"] == "albums"
        assert document["sort"] == "name"
        assert document["hidden"] == ["hide-spotify"]
        assert document["indices"] == ["⌘", "#", "Å", "B"]
        assert document["count"] == 4
        assert document["total"] == 50
        assert [item["id"] for item in document["groups"][3]["items"]] == [1]

    def test_sort_option(self, runner, albums_file):
        result = runner.invoke(
            app,
            ["show", str(albums_file), "--sort", "release-date", "-f", "json"],
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["indices"] == ["1977", "1985", "2000", "2002", "0000"]

    def test_unknown_preset_exits_with_error(self, runner, albums_file):
        result = runner.invoke(app, ["show", str(albums_file), "--preset", "genres"])

        assert result.exit_code == 1
        assert "Unknown preset 'genres'" in result.stdout

    def test_missing_file_exits_with_error(self, runner, tmp_path):
        result = runner.invoke(app, ["show", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Cannot read" in result.stdout
