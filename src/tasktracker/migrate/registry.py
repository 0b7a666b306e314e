# SPDX-License-Identifier: MIT

import importlib
import pkgutil
from copy import copy
from typing import Any, Callable

MIGRATIONS: dict[int, Callable[..., Any]] = {}


def migration[T, **P](version: int) -> Callable[[Callable[P, T]], Callable[P, T]]:
    def wrapper(func: Callable[P, T]) -> Callable[P, T]:
        if version in MIGRATIONS and MIGRATIONS[version] is not func:
            raise ValueError(f"migration {version} is registered twice")
        MIGRATIONS[version] = func
        return func

    return wrapper


def __import_all_modules(package_name: str) -> None:
    package = importlib.import_module(package_name)

    for _, modname, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package_name}.{modname}")


def register_migrations() -> None:
    __import_all_modules("tasktracker.migrate.migrations")


def get_migrations() -> dict[int, Callable[[], None]]:
    return copy(MIGRATIONS)
