#!/usr/bin/env python
"""CLI for Teams API tools.

Usage:
    python main.py articles [--config PATH]
    python main.py assign-sme [--config PATH]
"""

import sys

from teams_tools.cli import article_images_main, bulk_assign_sme_main

COMMANDS = {
    "articles": article_images_main,
    "assign-sme": bulk_assign_sme_main,
}


def main() -> None:
    """Entry point for the CLI."""
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(f"usage: {sys.argv[0]} {{{','.join(COMMANDS)}}} [--config PATH]", file=sys.stderr)
        sys.exit(2)
    COMMANDS[sys.argv[1]](sys.argv[2:])


if __name__ == "__main__":
    main()
