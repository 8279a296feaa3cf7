import pytest

from vertexos.registry import (
    AppAlreadyRunningError,
    AppRegistry,
    SimulatedApp,
    already_running_message,
)


def _registry(*apps):
    registry = AppRegistry()
    for app in apps:
        registry.add(app)
    return registry


def test_empty_registry():
    registry = AppRegistry()
    assert len(registry) == 0
    assert list(registry) == []
    assert not registry.is_running("calculator")


def test_add_keeps_order():
    calc = SimulatedApp("calculator", 45, 8)
    cal = SimulatedApp("calendar", 30, 5)
    registry = _registry(calc, cal)
    assert list(registry) == [calc, cal]
    assert len(registry) == 2


def test_is_running_matches_name():
    registry = _registry(SimulatedApp("notepad", 35, 6))
    assert registry.is_running("notepad")
    assert not registry.is_running("note")


def test_close_removes_every_instance_and_keeps_others():
    task = SimulatedApp("task", 55, 10)
    registry = _registry(task, SimulatedApp("filenest", 55, 10), task)
    registry.add(SimulatedApp("task", 1, 1))
    registry.close("task")
    assert [app.name for app in registry] == ["filenest"]
    assert not registry.is_running("task")


def test_close_unknown_name_changes_nothing():
    app = SimulatedApp("minigame", 60, 12)
    registry = _registry(app)
    registry.close("calendar")
    assert list(registry) == [app]


def test_ensure_not_running_raises_with_name():
    registry = _registry(SimulatedApp("calculator", 45, 8))
    with pytest.raises(AppAlreadyRunningError) as info:
        registry.ensure_not_running("calculator")
    assert info.value.name == "calculator"
    assert str(info.value) == already_running_message("calculator")


def test_ensure_not_running_passes_after_close():
    registry = _registry(SimulatedApp("calculator", 45, 8))
    registry.close("calculator")
    registry.ensure_not_running("calculator")
    assert len(registry) == 0


def test_message_text():
    assert already_running_message("calculator") == (
        'The app "calculator" is already running.'
    )


def test_iteration_is_a_snapshot():
    registry = _registry(SimulatedApp("a", 1, 1), SimulatedApp("b", 2, 2))
    names = []
    for app in registry:
        names.append(app.name)
        registry.close(app.name)
    assert names == ["a", "b"]
    assert len(registry) == 0