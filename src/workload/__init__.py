# SPDX-License-Identifier: MIT

from workload.initialize import initialize
from workload.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
