# SPDX-License-Identifier: MIT

import atexit

from caretrack.repository.configuration import CONFIGURATION_REPO


def flush() -> None:
    # Data stores write through on every command, only configuration is buffered
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
