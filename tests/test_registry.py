import pytest

from debugfire.registry import DemoConfig, MenuOption, Registry, RUN_TESTS_FILE


def _noop():
    return None


def test_default_config_matches_source():
    config = DemoConfig()
    assert config.title == "Welcome to C++!"
    assert config.demo_file_order[0] == RUN_TESTS_FILE
    assert config.demo_file_order[1:] == (
        "CallStackStorytellingGUI.cpp",
        "StackOverflowGUI.cpp",
        "FireGUI.cpp",
        "OnlyConnectGUI.cpp",
    )
    assert config.test_barriers["FireGUI.cpp"] == frozenset({"Fire.cpp"})


def test_program_title_and_test_order():
    registry = Registry()
    assert registry.program_title() == "Welcome to C++!"
    assert registry.test_order() == ["PredictivePolicing.cpp", "Fire.cpp", "OnlyConnect.cpp"]


def test_menu_sorted_by_file_order_then_line():
    registry = Registry()
    registry.register("Demos/StackOverflowGUI.cpp", 50, "Stack Overflows", _noop)
    registry.register("Demos/CallStackStorytellingGUI.cpp", 40, "Second", _noop)
    registry.register("Demos/CallStackStorytellingGUI.cpp", 10, "Storytelling", _noop)
    names = [option.name for option in registry.menu_options()]
    assert names == ["Storytelling", "Second", "Stack Overflows"]


def test_private_files_are_hidden():
    registry = Registry()
    registry.register("Demos/Secret.cpp", 1, "Hidden", _noop)
    registry.register("Demos/FireGUI.cpp", 1, "Fire", _noop)
    assert [option.name for option in registry.menu_options()] == ["Fire"]


def test_unbarriered_callback_is_passed_through():
    calls = []
    registry = Registry()
    registry.register("StackOverflowGUI.cpp", 3, "Stack Overflows", lambda: calls.append(1))
    (option,) = registry.menu_options()
    assert isinstance(option, MenuOption)
    option.callback()
    assert calls == [1]


def test_barrier_runs_demo_when_tests_pass(capsys):
    calls = []
    seen = []

    def failing(files):
        seen.append(files)
        return set()

    registry = Registry(failing_tests=failing)
    registry.register("FireGUI.cpp", 1, "Fire", lambda: calls.append("fire"))
    registry.menu_options()[0].callback()
    assert calls == ["fire"]
    assert seen == [frozenset({"Fire.cpp"})]
    assert "Running tests in Fire.cpp..." in capsys.readouterr().out


def test_barrier_blocks_demo_when_tests_fail(capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda *args: "")
    calls = []
    registry = Registry(failing_tests=lambda files: set(files))
    registry.register("FireGUI.cpp", 1, "Fire", lambda: calls.append("fire"))
    registry.menu_options()[0].callback()
    assert calls == []
    err = capsys.readouterr().err
    assert "Tests failed in Fire.cpp." in err
    assert "Press ENTER to continue." in err


def test_initial_demo_found_and_missing():
    first_calls = []
    config = DemoConfig(initial_handler="FireGUI.cpp")
    registry = Registry(config)
    assert registry.initial_demo() is None
    registry.register("FireGUI.cpp", 20, "Late", _noop)
    registry.register("FireGUI.cpp", 5, "Early", lambda: first_calls.append(1))
    demo = registry.initial_demo()
    demo()
    assert first_calls == [1]


def test_no_initial_demo_with_default_config():
    registry = Registry()
    registry.register("FireGUI.cpp", 5, "Fire", _noop)
    assert registry.initial_demo() is None


def test_run_tests_option_off_hides_testing_file():
    config = DemoConfig(run_tests_option=False)
    registry = Registry(config)
    registry.register("TestingGUI.cpp", 1, "Run Tests", _noop)
    assert registry.menu_options() == []


def test_register_uses_file_tail():
    registry = Registry()
    registry.register("a/b/c/OnlyConnectGUI.cpp", 7, "Only Connect", _noop)
    assert [option.name for option in registry.menu_options()] == ["Only Connect"]


@pytest.mark.parametrize("path", ["Fire.cpp", "Demos/Unknown.cpp"])
def test_non_menu_files_not_shown(path):
    registry = Registry()
    registry.register(path, 1, "X", _noop)
    assert registry.menu_options() == []