"""Tests for the command line interface."""

import re

import pytest
from click.testing import CliRunner

from lift_log.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def cli(runner, tmp_path):
    """Invoke the CLI against a temporary data directory."""

    def invoke(*args, input=None):
        return runner.invoke(main, ["--data-dir", str(tmp_path), *args], input=input)

    return invoke


@pytest.fixture
def initialized(cli):
    result = cli("init")
    assert result.exit_code == 0, result.output
    return cli


def logged_id(output: str) -> str:
    match = re.search(r"\(ID: ([0-9a-f]+)\)", output)
    assert match, output
    return match.group(1)


class TestInit:
    """Tests for init and the initialization guard."""

    def test_init_seeds_presets(self, cli):
        result = cli("init")

        assert result.exit_code == 0
        assert "Database initialized" in result.output
        assert "Preset programs added (2 programs)" in result.output

    def test_second_init_keeps_programs(self, initialized):
        result = initialized("init")
        assert "already present" in result.output

    def test_commands_require_init(self, cli):
        result = cli("history")

        assert result.exit_code == 1
        assert "not initialized" in result.output


class TestWorkoutCommands:
    """Tests for log, edit, delete and history."""

    def test_log_and_history(self, initialized):
        result = initialized("log", "chest", "Bench Press", "--reps", "10", "--weight", "40")
        assert result.exit_code == 0, result.output
        assert "Bench Press (chest) - 10 reps @ 40 kg" in result.output

        result = initialized("history")
        assert result.exit_code == 0
        assert "Bench Press" in result.output
        assert "Total: 1 workout(s)" in result.output

    def test_invalid_log_is_rejected(self, initialized):
        result = initialized("log", "chest", "Bench Press", "--reps", "0", "--weight", "40")

        assert result.exit_code == 1
        assert "Please enter a valid reps number" in result.output
        assert "No workouts found" in initialized("history").output

    def test_edit(self, initialized):
        entry_id = logged_id(
            initialized("log", "legs", "Squats", "-r", "8", "-w", "80").output
        )

        result = initialized("edit", entry_id, "--weight", "85", "--date", "2024-01-15 09:00")

        assert result.exit_code == 0, result.output
        assert "Squats (legs) - 8 reps @ 85 kg, 2024-01-15 09:00" in result.output
        assert "Not in the last week" in result.output

    def test_edit_unknown(self, initialized):
        result = initialized("edit", "deadbeef", "--reps", "3")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_delete_asks_for_confirmation(self, initialized):
        entry_id = logged_id(initialized("log", "core", "Plank", "-r", "1", "-w", "0").output)

        result = initialized("delete", entry_id, input="n\n")
        assert "Cancelled" in result.output
        assert "Plank" in initialized("history").output

        result = initialized("delete", entry_id, input="y\n")
        assert f"Workout {entry_id} deleted" in result.output
        assert "No workouts found" in initialized("history").output

    def test_delete_force(self, initialized):
        entry_id = logged_id(initialized("log", "core", "Plank", "-r", "1", "-w", "0").output)

        result = initialized("delete", entry_id, "--force")

        assert result.exit_code == 0
        assert "deleted" in result.output

    def test_history_filters(self, initialized):
        initialized("log", "chest", "Bench Press", "-r", "10", "-w", "40")
        initialized("log", "legs", "Squats", "-r", "8", "-w", "80")

        result = initialized("history", "--category", "legs")
        assert "Squats" in result.output
        assert "Bench Press" not in result.output

        result = initialized("history", "--match", "legs")
        assert "Squats" in result.output
        assert "Bench Press" not in result.output

        result = initialized(
            "history", "-t", "custom", "--start", "2000-01-01", "--end", "2000-01-31"
        )
        assert "No workouts found" in result.output

    def test_history_unknown_category(self, initialized):
        result = initialized("history", "--category", "arms")
        assert result.exit_code == 1
        assert "Unknown category" in result.output

    def test_catalog(self, cli):
        assert "legs (6 exercises)" in cli("catalog").output
        assert "Leg Press" in cli("catalog", "legs").output
        assert cli("catalog", "arms").exit_code == 1


class TestProgramCommands:
    """Tests for the programs group."""

    def test_list_and_show(self, initialized):
        result = initialized("programs", "list")
        assert "push-pull-legs" in result.output
        assert "Full Body Blast" in result.output

        result = initialized("programs", "show", "full-body")
        assert "Pull-Ups: Reps: 8, Weight: 0 kg" in result.output

    def test_apply_and_history(self, initialized):
        result = initialized("programs", "apply", "push-pull-legs")

        assert result.exit_code == 0, result.output
        assert "Added 3 workout(s) from Push Pull Legs" in result.output
        assert "Overhead Press" in result.output

        result = initialized("programs", "history", "push-pull-legs")
        assert "Total: 3 workout(s)" in result.output
        assert "No workouts found" in initialized("programs", "history", "full-body").output

    def test_apply_unknown(self, initialized):
        result = initialized("programs", "apply", "nope")
        assert result.exit_code == 1
        assert "Program nope not found" in result.output

    def test_delete_keeps_logged_workouts(self, initialized):
        initialized("programs", "apply", "full-body")

        result = initialized("programs", "delete", "full-body", "--force")
        assert "Program full-body deleted" in result.output
        assert "Full Body Blast" not in initialized("programs", "list").output

        # Dangling reference is shown as the raw id
        result = initialized("history")
        assert "Total: 3 workout(s)" in result.output
        assert "full-body" in result.output

    def test_delete_declined(self, initialized):
        result = initialized("programs", "delete", "full-body", input="n\n")
        assert "Cancelled" in result.output
        assert "Full Body Blast" in initialized("programs", "list").output


class TestSettingsCommands:
    """Tests for settings."""

    def test_dark_mode(self, initialized):
        assert "Dark mode is off" in initialized("settings", "dark-mode").output

        assert "turned on" in initialized("settings", "dark-mode", "on").output
        assert "Dark mode is on" in initialized("settings", "dark-mode").output
