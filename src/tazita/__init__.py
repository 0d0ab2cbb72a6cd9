# SPDX-License-Identifier: MIT

from tazita.initialize import initialize
from tazita.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
