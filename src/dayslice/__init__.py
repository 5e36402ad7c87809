# SPDX-License-Identifier: MIT

from dayslice.cleanup import register_cleanup
from dayslice.initialize import initialize
from dayslice.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
