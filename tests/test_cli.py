# SPDX-License-Identifier: MIT

from pathlib import Path

from typer.testing import CliRunner

from tasktracker.repository.configuration import CONFIGURATION_REPO
from tasktracker.repository.reminder import REMINDER_REPO
from tasktracker.repository.task import TASK_REPO
from tasktracker.terminal.app import app

runner = CliRunner(env={"COLUMNS": "200"})


def invoke(*args: str):
    return runner.invoke(app, ["--no-header", *args])


def test_add_then_list_shows_task() -> None:
    result = invoke(
        "task", "add", "Write report", "--due", "2030-01-10", "--tags", "work, q1"
    )
    assert result.exit_code == 0, result.output

    result = invoke("t", "ls")
    assert result.exit_code == 0, result.output
    assert "Write report" in result.output
    assert "work, q1" in result.output


def test_add_rejects_blank_title() -> None:
    result = invoke("task", "add", "   ")

    assert result.exit_code != 0
    assert TASK_REPO.get_all_tasks() == []


def test_done_hides_task_from_pending_list_and_cancels_reminders() -> None:
    invoke("task", "add", "Pay rent", "--due", "2030-01-01")
    invoke("task", "add", "Buy milk")
    invoke("task", "list")

    result = invoke("task", "done", "1")
    assert result.exit_code == 0, result.output

    result = invoke("task", "list")
    assert "Pay rent" not in result.output
    assert "Buy milk" in result.output
    assert REMINDER_REPO.get_all_reminders() == []

    result = invoke("task", "list", "--status", "done")
    assert "Pay rent" in result.output


def test_unknown_task_id_is_a_usage_error() -> None:
    result = invoke("task", "done", "42")

    assert result.exit_code == 2


def test_note_commands_keep_positions() -> None:
    invoke("task", "add", "Refactor parser", "--note", "first pass")
    invoke("task", "list")

    assert invoke("note", "add", "1", "second pass").exit_code == 0
    assert invoke("n", "rm", "1", "0").exit_code == 0

    task = TASK_REPO.get_all_tasks()[0]
    assert [(n["text"], n["position"]) for n in task["work_notes"]] == [
        ("second pass", 0)
    ]


def test_attachment_copy_and_path(tmp_path: Path) -> None:
    source = tmp_path / "brief.txt"
    source.write_text("contents")
    invoke("task", "add", "Read brief")
    invoke("task", "list")

    assert invoke("attachment", "copy", "1", str(source)).exit_code == 0
    result = invoke("at", "path", "1", "0")

    assert result.exit_code == 0, result.output
    assert "brief.txt" in result.output


def test_search_filter() -> None:
    invoke("task", "add", "Call plumber")
    invoke("task", "add", "Email bank", "--note", "mortgage paperwork")

    result = invoke("task", "list", "--search", "MORTGAGE")

    assert "Email bank" in result.output
    assert "Call plumber" not in result.output


def test_config_set_validates_thresholds() -> None:
    result = invoke("config", "set", "--blue", "400")
    assert result.exit_code == 2

    result = invoke("config", "set", "--blue", "45", "--red", "1")
    assert result.exit_code == 0, result.output
    config = CONFIGURATION_REPO.get_config()
    assert config["blue_min_days"] == 45
    assert config["red_min_days"] == 1


def test_config_reset_colors() -> None:
    invoke("config", "set", "--yellow", "3")

    assert invoke("config", "reset-colors").exit_code == 0
    assert CONFIGURATION_REPO.get_config()["yellow_min_days"] == 15


def test_tag_suggest() -> None:
    invoke("task", "add", "Plan trip", "--tags", "Travel, tax")

    result = invoke("tag", "suggest", "t")

    assert result.output.split() == ["tax", "Travel"]


def test_deleted_task_id_is_a_usage_error() -> None:
    invoke("task", "add", "Return library books")
    invoke("task", "list")
    assert invoke("task", "delete", "1").exit_code == 0

    assert invoke("task", "show", "1").exit_code == 2
    assert invoke("note", "add", "1", "renewed online").exit_code == 2
    assert invoke("task", "delete", "1").exit_code == 2


def test_tag_pick_merges_into_current_input() -> None:
    invoke("task", "add", "Plan trip", "--tags", "Travel")

    result = invoke("tag", "pick", "budget, visa", "travel")

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "Travel, budget, visa"
