# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime))
    pendulum_date_time = pendulum_date_time.set(tz="local")
    pendulum_date_time = pendulum_date_time.in_tz("UTC")
    return pendulum_date_time


def datetime_to_display_local_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd")


def datetime_to_display_local_date_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_date_str(datetime)


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd HH:mm")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime)


def days_until(
    due: pendulum.DateTime, now: Optional[pendulum.DateTime] = None
) -> int:
    """Whole calendar days from the start of today to the start of the due day.

    Both ends are taken in local time, so a task due later today is 0 days
    away and a task due yesterday is -1.
    """
    if now is None:
        now = pendulum.now("local")
    start = now.in_tz("local").date()
    end = due.in_tz("local").date()
    return (end - start).days
