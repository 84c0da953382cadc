# SPDX-License-Identifier: MIT

from caretrack.cleanup import register_cleanup
from caretrack.initialize import initialize
from caretrack.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
