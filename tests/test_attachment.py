# SPDX-License-Identifier: MIT

from pathlib import Path

import pytest

from tasktracker import configuration
from tasktracker.repository.task import TASK_REPO
from tasktracker.service import attachment as attachment_service
from tasktracker.service.task import create_task, delete_task


@pytest.fixture()
def report(tmp_path: Path) -> Path:
    path = tmp_path / "outside" / "report.pdf"
    path.parent.mkdir()
    path.write_bytes(b"%PDF-1.4 quarterly numbers")
    return path


def test_link_stores_bookmark_and_metadata(report: Path) -> None:
    id = create_task("review report")

    attachment = attachment_service.link_attachment(id, report)

    assert attachment["bookmark"] == str(report.resolve())
    assert attachment["relative_path"] is None
    assert attachment["file_name"] == "report.pdf"
    assert attachment["content_type"] == "application/pdf"
    assert attachment["size"] == report.stat().st_size
    assert attachment_service.resolve_attachment_path(attachment) == report.resolve()


def test_copy_places_file_under_attachments_dir(report: Path) -> None:
    id = create_task("review report")

    attachment = attachment_service.copy_attachment(id, report)

    assert attachment["bookmark"] is None
    assert attachment["relative_path"] == f"{id}/report.pdf"
    copied = attachment_service.resolve_attachment_path(attachment)
    assert copied == configuration.DATA_ATTACHMENTS_DIR / id / "report.pdf"
    assert copied.read_bytes() == report.read_bytes()


def test_copying_the_same_name_twice_keeps_both(report: Path) -> None:
    id = create_task("review report")

    first = attachment_service.copy_attachment(id, report)
    second = attachment_service.copy_attachment(id, report)

    assert first["relative_path"] != second["relative_path"]
    assert [a["position"] for a in TASK_REPO.get_task(id)["attachments"]] == [0, 1]


def test_remove_deletes_copy_but_not_linked_file(report: Path) -> None:
    id = create_task("review report")
    attachment_service.link_attachment(id, report)
    copied = attachment_service.copy_attachment(id, report)
    copied_path = attachment_service.resolve_attachment_path(copied)

    attachment_service.remove_attachment(id, 1)
    attachment_service.remove_attachment(id, 0)

    assert not copied_path.exists()
    assert report.exists()
    assert TASK_REPO.get_task(id)["attachments"] == []


def test_remove_reindexes_remaining(report: Path, tmp_path: Path) -> None:
    id = create_task("review report")
    other = tmp_path / "notes.txt"
    other.write_text("hello")
    attachment_service.link_attachment(id, report)
    attachment_service.link_attachment(id, other)
    attachment_service.link_attachment(id, report)

    attachment_service.remove_attachment(id, 0)

    attachments = TASK_REPO.get_task(id)["attachments"]
    assert [(a["file_name"], a["position"]) for a in attachments] == [
        ("notes.txt", 0),
        ("report.pdf", 1),
    ]


def test_missing_link_target_raises(report: Path) -> None:
    id = create_task("review report")
    attachment = attachment_service.link_attachment(id, report)
    report.unlink()

    with pytest.raises(FileNotFoundError):
        attachment_service.resolve_attachment_path(attachment)


def test_attaching_a_missing_file_raises(tmp_path: Path) -> None:
    id = create_task("review report")

    with pytest.raises(FileNotFoundError):
        attachment_service.link_attachment(id, tmp_path / "nope.txt")


def test_deleting_task_removes_copied_files(report: Path) -> None:
    id = create_task("review report")
    attachment_service.copy_attachment(id, report)

    delete_task(id)

    assert not (configuration.DATA_ATTACHMENTS_DIR / id).exists()
    assert report.exists()
