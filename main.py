"""Entry point for browsing the gridmenu demo menus."""

import argparse
import logging

from gridmenu import run_pygame


def main() -> None:
    parser = argparse.ArgumentParser(description="gridmenu demo window")
    parser.add_argument("--user", default="local", help="name of the local menu owner")
    parser.add_argument("--cell-size", type=int, default=64, help="pixel size of one grid cell")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print navigation and dispatch logging to the console",
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    run_pygame(user=args.user, cell_size=args.cell_size, debug=args.debug)


if __name__ == "__main__":
    main()
