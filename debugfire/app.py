"""Console driver: an intro, an optional first demo, then the main menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from .menu import make_selection_from
from .registry import Registry
from .story import DEFAULT_NAME, initiate_stack_overflow, tell_story

_INTRO = "You have switched to the console window. Press ENTER to continue."
_AGAIN_PROMPT = "You are back at the main menu. Would you like to pick again?"
_STORY_PROMPT = (
    "Press ENTER to call the function that tells a story. Make sure you've set "
    "a breakpoint at the appropriate spot in the story module"
)
_OVERFLOW_PROMPT = "Do you want to trigger a stack overflow? "

STORY_FILE = "CallStackStorytellingGUI.cpp"
OVERFLOW_FILE = "StackOverflowGUI.cpp"


def _get_yes_or_no(prompt: str) -> bool:
    """Ask until the answer starts with 'y' or 'n'."""
    while True:
        answer = input(prompt).strip().lower()
        if answer.startswith("y"):
            return True
        if answer.startswith("n"):
            return False
        print("Please type a word that starts with 'Y' or 'N'.")


def _choose_from_menu(registry: Registry) -> int:
    names = [option.name for option in registry.menu_options()]
    names.append("Quit")
    print(registry.program_title())
    return make_selection_from("Please make a selection:", names)


def console_main(
    registry: Registry, initial_demo: Callable[[], None] | None = None
) -> None:
    """Run the console menu loop until the user quits."""
    print(_INTRO)
    input()

    while True:
        if initial_demo is not None:
            demo, initial_demo = initial_demo, None
            demo()
            if not registry.menu_options():
                break
        else:
            options = registry.menu_options()
            selection = _choose_from_menu(registry)
            if selection == len(options):
                break
            options[selection].callback()

        print()
        if not _get_yes_or_no(_AGAIN_PROMPT):
            break

    print()
    print("Exiting...")


def build_registry(name: str = DEFAULT_NAME) -> Registry:
    """A registry holding the storytelling and stack-overflow demos for a name."""
    registry = Registry()

    def storytelling() -> None:
        input(_STORY_PROMPT)
        print(tell_story(name))

    def stack_overflows() -> None:
        if _get_yes_or_no(_OVERFLOW_PROMPT):
            initiate_stack_overflow(name)

    registry.register(STORY_FILE, 1, "Storytelling", storytelling)
    registry.register(OVERFLOW_FILE, 1, "Stack Overflows", stack_overflows)
    return registry


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; returns the exit status."""
    parser = argparse.ArgumentParser(description="Debugger warm-up exercises.")
    parser.add_argument("--name", default=DEFAULT_NAME, help="your name")
    args = parser.parse_args(argv)

    registry = build_registry(args.name)
    try:
        console_main(registry, registry.initial_demo())
    except RecursionError:
        print("Stack overflow: the call chain never ended.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0