# SPDX-License-Identifier: MIT

import logging
import mimetypes
import shutil
from pathlib import Path

from tasktracker import configuration
from tasktracker.model.attachment import Attachment
from tasktracker.model.entity_id import EntityId
from tasktracker.repository.task import TASK_REPO
from tasktracker.service import position
from tasktracker.template.attachment import get_attachment_template

logger = logging.getLogger(__name__)


def __describe_file(source: Path) -> Attachment:
    if not source.exists():
        raise FileNotFoundError(f"no such file: {source}")
    if not source.is_file():
        raise ValueError(f"not a regular file: {source}")

    attachment = get_attachment_template()
    attachment["file_name"] = source.name
    attachment["content_type"] = mimetypes.guess_type(source.name)[0]
    attachment["size"] = source.stat().st_size
    return attachment


def __unique_destination(folder: Path, file_name: str) -> Path:
    destination = folder / file_name
    counter = 1
    while destination.exists():
        destination = folder / f"{Path(file_name).stem}-{counter}{Path(file_name).suffix}"
        counter += 1
    return destination


def __save_attachment(task_id: EntityId, attachment: Attachment) -> Attachment:
    task = TASK_REPO.get_task(task_id)
    attachments = position.append(task["attachments"], attachment)
    TASK_REPO.modify_task(task_id, attachments=attachments)
    return attachment


def link_attachment(task_id: EntityId, source: Path) -> Attachment:
    """Attach a file in place, keeping a bookmark token that re-opens it."""
    # fail before touching anything if the task is unknown
    TASK_REPO.get_task(task_id)

    attachment = __describe_file(source)
    attachment["bookmark"] = str(source.expanduser().resolve())
    logger.info("linking %s to task %s", attachment["bookmark"], task_id)
    return __save_attachment(task_id, attachment)


def copy_attachment(task_id: EntityId, source: Path) -> Attachment:
    """Copy a file into the data directory and attach the copy."""
    TASK_REPO.get_task(task_id)

    attachment = __describe_file(source)

    folder = configuration.DATA_ATTACHMENTS_DIR / task_id
    folder.mkdir(parents=True, exist_ok=True)
    destination = __unique_destination(folder, source.name)
    shutil.copy2(source, destination)

    attachment["relative_path"] = destination.relative_to(
        configuration.DATA_ATTACHMENTS_DIR
    ).as_posix()
    logger.info("copied %s to %s", source, destination)
    return __save_attachment(task_id, attachment)


def resolve_attachment_path(attachment: Attachment) -> Path:
    if attachment["bookmark"] is not None:
        path = Path(attachment["bookmark"])
    elif attachment["relative_path"] is not None:
        path = configuration.DATA_ATTACHMENTS_DIR / attachment["relative_path"]
    else:
        raise ValueError(
            f"attachment {attachment['file_name']} has neither a bookmark nor a local copy"
        )

    if not path.exists():
        raise FileNotFoundError(f"attachment target is missing: {path}")
    return path


def remove_attachment(task_id: EntityId, attachment_position: int) -> Attachment:
    task = TASK_REPO.get_task(task_id)
    attachments, removed = position.remove(task["attachments"], attachment_position)

    if removed["relative_path"] is not None:
        copied_file = configuration.DATA_ATTACHMENTS_DIR / removed["relative_path"]
        if copied_file.exists():
            copied_file.unlink()
            logger.info("deleted copied attachment %s", copied_file)

    TASK_REPO.modify_task(task_id, attachments=attachments)
    return removed


def move_attachment(
    task_id: EntityId, attachment_position: int, new_position: int
) -> None:
    task = TASK_REPO.get_task(task_id)
    attachments = position.move(task["attachments"], attachment_position, new_position)

    TASK_REPO.modify_task(task_id, attachments=attachments)


def remove_task_attachment_files(task_id: EntityId) -> None:
    folder = configuration.DATA_ATTACHMENTS_DIR / task_id
    if folder.is_dir():
        shutil.rmtree(folder)
        logger.info("deleted attachment folder %s", folder)
