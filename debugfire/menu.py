"""Console prompts for choosing among options and files."""

from __future__ import annotations

import os
from collections.abc import Sequence


def _read_integer(prompt: str) -> int:
    while True:
        line = input(prompt).strip()
        try:
            return int(line)
        except ValueError:
            print("Illegal integer format. Try again.")


def make_selection_from(title: str, options: Sequence[str]) -> int:
    """List the options, then prompt until one is picked; returns its index."""
    if not options:
        raise ValueError("Requesting the user to pick an item from an empty list.")

    print(title)
    for index, option in enumerate(options):
        print(f"{index} {option}")

    while True:
        result = _read_integer("Your choice: ")
        if 0 <= result < len(options):
            return result
        print(f"Please enter a number between 0 and {len(options) - 1}")


def make_file_selection(suffix: str, directory: str = "res/") -> str:
    """Ask the user to pick a file with the given suffix from a directory; returns its path."""
    listing = directory if directory else "."
    options = sorted(name for name in os.listdir(listing) if name.endswith(suffix))

    effective = directory if directory else "."
    if not effective.endswith("/"):
        effective += "/"

    choice = make_selection_from("Please choose a demo file from this list:", options)
    return effective + options[choice]