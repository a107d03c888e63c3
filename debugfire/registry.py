"""Registration and ordering of the demos offered in the main menu."""

from __future__ import annotations

import dataclasses
import os
import sys
from collections.abc import Callable, Collection, Iterable, Mapping

RUN_TESTS_FILE = "TestingGUI.cpp"
"""File whose demo runs the test suite; listed first when that option is on."""

_TEST_RUNNING_MESSAGE = "Running tests in {}..."
_TEST_FAILED_MESSAGE = (
    'Tests failed in {}. Select the "Run Tests" option to see which tests failed.'
)

FailingTests = Callable[[frozenset[str]], Collection[str]]


@dataclasses.dataclass(frozen=True)
class MenuOption:
    """A named entry in the main menu."""

    name: str
    callback: Callable[[], None]


@dataclasses.dataclass(frozen=True)
class DemoConfig:
    """Program title, menu and test ordering, test barriers and the initial demo."""

    title: str = "Welcome to C++!"
    run_tests_option: bool = True
    menu_order: tuple[str, ...] = (
        "CallStackStorytellingGUI.cpp",
        "StackOverflowGUI.cpp",
        "FireGUI.cpp",
        "OnlyConnectGUI.cpp",
    )
    test_order: tuple[str, ...] = (
        "PredictivePolicing.cpp",
        "Fire.cpp",
        "OnlyConnect.cpp",
    )
    test_barriers: Mapping[str, frozenset[str]] = dataclasses.field(
        default_factory=lambda: {
            "FireGUI.cpp": frozenset({"Fire.cpp"}),
            "OnlyConnectGUI.cpp": frozenset({"OnlyConnect.cpp"}),
        }
    )
    initial_handler: str = ""

    @property
    def demo_file_order(self) -> tuple[str, ...]:
        """Every file whose demos are shown, in menu order."""
        prefix = (RUN_TESTS_FILE,) if self.run_tests_option else ()
        return prefix + tuple(self.menu_order)


@dataclasses.dataclass(frozen=True)
class _Handler:
    filename: str
    line: int
    name: str
    callback: Callable[[], None]
    is_public: bool


def _conjunction_join(items: Iterable[str], conjunction: str = "and") -> str:
    words = sorted(items)
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]} {conjunction} {words[1]}"
    return ", ".join(words[:-1]) + f", {conjunction} {words[-1]}"


class Registry:
    """Collects demo handlers and turns them into menu options."""

    def __init__(
        self,
        config: DemoConfig | None = None,
        failing_tests: FailingTests | None = None,
    ) -> None:
        self.config = config if config is not None else DemoConfig()
        self._failing_tests = failing_tests
        self._handlers: list[_Handler] = []

    def register(
        self, filename: str, line: int, name: str, callback: Callable[[], None]
    ) -> None:
        """Add a demo defined at the given file and line.

        Demos from files not in the menu order are kept but not shown.
        """
        tail = os.path.basename(filename.replace("\\", "/"))
        is_public = tail in self.config.demo_file_order
        self._handlers.append(_Handler(tail, line, name, callback, is_public))

    def _file_index(self, filename: str) -> int:
        order = self.config.demo_file_order
        return order.index(filename) if filename in order else len(order)

    def _sorted_handlers(self) -> list[_Handler]:
        return sorted(
            self._handlers,
            key=lambda h: (self._file_index(h.filename), h.filename, h.line),
        )

    def _with_barrier(
        self, filenames: frozenset[str], callback: Callable[[], None]
    ) -> Callable[[], None]:
        failing_tests = self._failing_tests
        if failing_tests is None:
            return callback

        def guarded() -> None:
            print(_TEST_RUNNING_MESSAGE.format(_conjunction_join(filenames)))
            fails = set(failing_tests(filenames)) & set(filenames)
            if not fails:
                callback()
                return
            print(_TEST_FAILED_MESSAGE.format(_conjunction_join(fails)), file=sys.stderr)
            print("Press ENTER to continue.", file=sys.stderr)
            input()

        return guarded

    def menu_options(self) -> list[MenuOption]:
        """The visible demos in menu order, guarded by their test barriers."""
        result = []
        for handler in self._sorted_handlers():
            if not handler.is_public:
                continue
            barrier = self.config.test_barriers.get(handler.filename)
            callback = handler.callback
            if barrier is not None:
                callback = self._with_barrier(frozenset(barrier), callback)
            result.append(MenuOption(handler.name, callback))
        return result

    def test_order(self) -> list[str]:
        """Test files in the order their tests are run."""
        return list(self.config.test_order)

    def program_title(self) -> str:
        return self.config.title

    def initial_demo(self) -> Callable[[], None] | None:
        """The first demo from the configured initial file, or None."""
        for handler in self._sorted_handlers():
            if handler.filename == self.config.initial_handler:
                return handler.callback
        return None