# SPDX-License-Identifier: MIT

from trackline.cleanup import register_cleanup
from trackline.initialize import initialize
from trackline.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
