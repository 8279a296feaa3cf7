import datetime

import pytest
from PIL import Image

from vertexos.desktop import (
    DEFAULT_SIZE,
    HOME_IMAGES,
    AppSpec,
    Desktop,
    format_clock,
    load_wallpaper_index,
    next_wallpaper_index,
    save_wallpaper_index,
)
from vertexos.registry import AppAlreadyRunningError, AppRegistry


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_next_wallpaper_wraps_around():
    assert next_wallpaper_index(0) == 1
    assert next_wallpaper_index(len(HOME_IMAGES) - 1) == 0


def test_next_wallpaper_cycle_returns_to_start():
    index = 2
    for _ in HOME_IMAGES:
        index = next_wallpaper_index(index)
    assert index == 2


@pytest.mark.parametrize("index", range(len(HOME_IMAGES)))
def test_save_load_round_trip(tmp_path, index):
    path = tmp_path / "cfg.txt"
    save_wallpaper_index(path, index)
    assert load_wallpaper_index(path) == index
    assert path.read_text() == str(index)


def test_load_missing_file_gives_zero(tmp_path):
    assert load_wallpaper_index(tmp_path / "absent.txt") == 0


def test_load_garbage_gives_zero(tmp_path):
    path = tmp_path / "cfg.txt"
    path.write_text("wallpaper")
    assert load_wallpaper_index(path) == 0


def test_load_out_of_range_is_wrapped(tmp_path):
    path = tmp_path / "cfg.txt"
    path.write_text(str(2 + len(HOME_IMAGES)))
    assert load_wallpaper_index(path) == 2


def test_load_reads_leading_number(tmp_path):
    path = tmp_path / "cfg.txt"
    path.write_text("  3 trailing")
    assert load_wallpaper_index(path) == 3


def test_save_failure_is_reported(tmp_path, capsys):
    save_wallpaper_index(tmp_path, 1)
    assert "Failed to save wallpaper index" in capsys.readouterr().err


def test_clock_midnight():
    assert format_clock(datetime.datetime(2024, 1, 5, 0, 7, 9)) == "5 JAN 2024 12:07:09 AM"


def test_clock_noon():
    assert format_clock(datetime.datetime(2023, 12, 25, 12, 0, 0)) == "25 DEC 2023 12:00:00 PM"


def test_clock_afternoon():
    assert format_clock(datetime.datetime(2022, 6, 30, 15, 4, 5)) == "30 JUN 2022 3:04:05 PM"


def test_clock_morning_keeps_hour():
    text = format_clock(datetime.datetime(2022, 6, 30, 9, 4, 5))
    assert text.endswith("AM")
    assert " 9:04:05 " in text


def test_default_apps_match_the_desktop():
    desktop = Desktop(None, AppRegistry())
    assert set(desktop.apps) == {
        "calculator", "calendar", "minigame", "random_generator",
        "notepad", "filenest", "audio_player", "task",
    }
    calc = desktop.apps["calculator"]
    assert (calc.ram_usage_mb, calc.disk_usage_mb) == (45, 8)
    assert desktop.apps["audio_player"].ram_usage_mb is None


def test_launch_registers_and_calls_launcher(tmp_path):
    registry = AppRegistry()
    desktop = Desktop(None, registry, tmp_path / "cfg.txt")
    calls = []

    def launcher(parent, reg):
        calls.append((parent, reg))
        return "window"

    desktop.apps["probe"] = AppSpec("probe", "probe.png", 0, 0, launcher, 12, 3)
    assert desktop.launch("probe") == "window"
    assert calls == [(None, registry)]
    assert registry.is_running("probe")
    assert [(a.ram_usage_mb, a.disk_usage_mb) for a in registry] == [(12, 3)]


def test_launch_twice_raises(tmp_path):
    registry = AppRegistry()
    desktop = Desktop(None, registry, tmp_path / "cfg.txt")
    desktop.apps["probe"] = AppSpec("probe", "p.png", 0, 0, lambda p, r: None, 1, 1)
    desktop.launch("probe")
    with pytest.raises(AppAlreadyRunningError):
        desktop.launch("probe")
    assert len(registry) == 1


def test_launch_self_registering_app_adds_nothing(tmp_path):
    registry = AppRegistry()
    desktop = Desktop(None, registry, tmp_path / "cfg.txt")
    desktop.apps["probe"] = AppSpec("probe", "p.png", 0, 0, lambda p, r: "ok")
    assert desktop.launch("probe") == "ok"
    assert len(registry) == 0


def test_launch_unknown_app_raises():
    with pytest.raises(KeyError):
        Desktop(None, AppRegistry()).launch("nothing")


def test_cycle_wallpaper_saves_choice(workdir, capsys):
    config = workdir / "cfg.txt"
    desktop = Desktop(None, AppRegistry(), config)
    assert desktop.cycle_wallpaper() == 1
    assert load_wallpaper_index(config) == 1
    seen = [desktop.cycle_wallpaper() for _ in range(len(HOME_IMAGES) - 1)]
    assert seen[-1] == 0
    assert "Failed to load image" in capsys.readouterr().err


def test_set_background_uses_default_size(workdir):
    Image.new("RGB", (10, 10), "blue").save(workdir / HOME_IMAGES[1])
    config = workdir / "cfg.txt"
    save_wallpaper_index(config, 1)
    desktop = Desktop(None, AppRegistry(), config)
    scaled = desktop.set_background()
    assert desktop.current_index == 1
    assert scaled.size == DEFAULT_SIZE
    assert desktop.background is scaled


def test_set_background_missing_image(workdir, capsys):
    desktop = Desktop(None, AppRegistry(), workdir / "cfg.txt")
    assert desktop.set_background() is None
    assert desktop.background is None
    assert "Failed to load image" in capsys.readouterr().err


def test_shutdown_without_window_raises():
    with pytest.raises(RuntimeError):
        Desktop(None, AppRegistry()).shutdown()


def test_build_without_window_raises():
    with pytest.raises(RuntimeError):
        Desktop(None, AppRegistry()).build()