# SPDX-License-Identifier: MIT

import os
import re
import subprocess
import tempfile
from typing import Optional

import pendulum
import typer

from tasktracker.time import datetime_from_str_utc

DATETIME_HELP = (
    "valid inputs: YYYY-MM-DD, YYYY-MM-DD HH:mm, HH:mm, now, today, "
    "tomorrow, or day offset like 1, -1"
)


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param).strip()

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str_utc(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match (H)H:mm format (time only, use today's date)
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))

        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

        pendulum_date_time = pendulum.today("local").set(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        return pendulum_date_time.in_tz("UTC")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        pendulum_date_time = pendulum.today("local").add(days=int(datetime))
        return pendulum_date_time.in_tz("UTC")

    if datetime == "now" or datetime == "n":
        return pendulum.now("UTC")
    if datetime == "today" or datetime == "t":
        return pendulum.today("local").in_tz("UTC")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow("local").in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def parse_id_list(id_param: str) -> list[int]:
    """
    Parse a single ID, comma-separated list of IDs, or ranges of IDs.

    Args:
        id_param: A single ID (e.g., "1"), comma-separated list (e.g., "1,2,3"),
                  range (e.g., "1-5"), or mixed (e.g., "1,3-5,8")

    Returns:
        List of integer IDs (sorted and deduplicated)

    Raises:
        typer.BadParameter: If any ID is not a valid integer or range format is invalid
    """
    ids: list[int] = []
    for id_str in (s.strip() for s in id_param.split(",")):
        if not id_str:
            continue

        if "-" in id_str:
            range_parts = id_str.split("-")
            if len(range_parts) != 2:
                raise typer.BadParameter(
                    f"Invalid range format: '{id_str}' (expected format: 'start-end')"
                )

            try:
                start = int(range_parts[0].strip())
                end = int(range_parts[1].strip())
            except ValueError:
                raise typer.BadParameter(
                    f"Invalid range: '{id_str}' contains non-integer values"
                )

            if start > end:
                raise typer.BadParameter(
                    f"Invalid range: '{id_str}' (start must be <= end)"
                )

            ids.extend(range(start, end + 1))
        else:
            try:
                ids.append(int(id_str))
            except ValueError:
                raise typer.BadParameter(
                    f"Invalid ID: '{id_str}' is not a valid integer"
                )

    if len(ids) == 0:
        raise typer.BadParameter("No valid IDs provided")

    return sorted(set(ids))


def open_editor_for_text(initial_text: Optional[str] = None) -> Optional[str]:
    """
    Open the user's preferred editor to write a work note.
    Returns the edited text with trailing newlines removed, or None if empty.
    """
    editor = os.environ.get("EDITOR", "nano")

    with tempfile.NamedTemporaryFile(mode="w+", suffix=".txt") as tf:
        if initial_text is not None:
            tf.write(initial_text)
            tf.flush()

        subprocess.run([editor, tf.name], check=True)
        tf.seek(0)
        text = tf.read()
        if not text.strip():
            return None
        return text.rstrip("\n")
