# SPDX-License-Identifier: MIT

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pendulum

from tasktracker import configuration
from tasktracker.model.task import Task
from tasktracker.time import days_until

logger = logging.getLogger(__name__)

MIN_THRESHOLD_DAYS = 0
MAX_THRESHOLD_DAYS = 365


class DueColor(Enum):
    """Severity colors, valued by the Rich style used to draw them."""

    BLUE = "blue"
    YELLOW = "yellow"
    ORANGE = "dark_orange"
    RED = "red"
    CRIMSON = "dark_red"
    MUTED = "bright_black"


def clamp_threshold(days: int) -> int:
    return max(MIN_THRESHOLD_DAYS, min(MAX_THRESHOLD_DAYS, days))


@dataclass(frozen=True)
class DueColorScheme:
    """
    Thresholds are the *minimum days remaining* to fall into a color.

    Blue = no due date or >= blue_min_days
    Yellow >= yellow_min_days and < blue_min_days
    Orange >= orange_min_days and < yellow_min_days
    Red >= red_min_days and < orange_min_days
    Crimson < red_min_days (overdue also maps to crimson)
    """

    blue_min_days: int = configuration.DEFAULT_BLUE_MIN_DAYS
    yellow_min_days: int = configuration.DEFAULT_YELLOW_MIN_DAYS
    orange_min_days: int = configuration.DEFAULT_ORANGE_MIN_DAYS
    red_min_days: int = configuration.DEFAULT_RED_MIN_DAYS

    @classmethod
    def from_config(cls, config: configuration.Configuration) -> "DueColorScheme":
        scheme = cls(
            blue_min_days=clamp_threshold(config["blue_min_days"]),
            yellow_min_days=clamp_threshold(config["yellow_min_days"]),
            orange_min_days=clamp_threshold(config["orange_min_days"]),
            red_min_days=clamp_threshold(config["red_min_days"]),
        )
        if not scheme.is_ordered():
            logger.warning(
                "due color thresholds are out of order (blue=%d yellow=%d orange=%d red=%d)",
                scheme.blue_min_days,
                scheme.yellow_min_days,
                scheme.orange_min_days,
                scheme.red_min_days,
            )
        return scheme

    def is_ordered(self) -> bool:
        return (
            self.blue_min_days
            >= self.yellow_min_days
            >= self.orange_min_days
            >= self.red_min_days
        )

    def color_for_days(self, days: int) -> DueColor:
        if days >= self.blue_min_days:
            return DueColor.BLUE
        if days >= self.yellow_min_days:
            return DueColor.YELLOW
        if days >= self.orange_min_days:
            return DueColor.ORANGE
        if days >= self.red_min_days:
            return DueColor.RED
        return DueColor.CRIMSON


def color_for_task(
    task: Task,
    scheme: Optional[DueColorScheme] = None,
    now: Optional[pendulum.DateTime] = None,
) -> DueColor:
    if task["status"] != "pending":
        return DueColor.MUTED
    if task["due"] is None:
        return DueColor.BLUE

    if scheme is None:
        scheme = DueColorScheme()
    return scheme.color_for_days(days_until(task["due"], now))
