# SPDX-License-Identifier: MIT

from contextvars import ContextVar

from tasktracker.configuration import Configuration

# Per-invocation display switches. Seeded from config.yaml, overridden by the
# global --no-header / --keep-ids flags.
_show_header: ContextVar[bool] = ContextVar("show_header", default=True)
_clear_ids: ContextVar[bool] = ContextVar("clear_ids", default=True)


def apply_configuration(config: Configuration) -> None:
    _show_header.set(config["show_header"])
    _clear_ids.set(config["clear_ids_on_view"])


def set_show_header(value: bool) -> None:
    _show_header.set(value)


def get_show_header() -> bool:
    return _show_header.get()


def set_clear_ids(value: bool) -> None:
    """When False, a listing reuses the synthetic ids of the previous one."""
    _clear_ids.set(value)


def get_clear_ids() -> bool:
    return _clear_ids.get()
