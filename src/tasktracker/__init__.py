# SPDX-License-Identifier: MIT

import logging

from tasktracker.cleanup import register_cleanup
from tasktracker.initialize import initialize
from tasktracker.terminal.app import run

logger = logging.getLogger(__name__)


def main() -> None:
    initialize()
    register_cleanup()
    try:
        run()
    except Exception:
        logger.exception("tasktracker stopped on an unexpected error")
        raise


if __name__ == "__main__":
    main()
