# tests/conftest.py
# Pytest configuration w/ isolation fixtures & shared playlist/workout samples

import json
from pathlib import Path

import pytest

from pacer.core.clock import ManualClock
from pacer.core.timer import PlaybackTimer
from pacer.core.types import Segment

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()
    pacer_dir = fake_home / ".pacer"
    pacer_dir.mkdir()

    # minimal config.json w/ test defaults
    config_data = {
        "tick_ms": 100,
        "speed": 1.0,
        "output_dir": "output",
        "playlist_filename": "playlist.json",
        "dev_mode": False,
    }
    (pacer_dir / "config.json").write_text(json.dumps(config_data, indent=2))

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("PACER_CONFIG", raising=False)

    # ! reset global settings_manager state & point it at the isolated location
    from pacer.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = pacer_dir / "config.json"

    # ! back to SilentLog so CLI sessions don't leak between tests
    from pacer.core.output import uninstall_log

    uninstall_log()
    yield fake_home
    uninstall_log()


# ! wide console so Rich tables don't wrap labels in captured output
@pytest.fixture(autouse=True)
def wide_console():
    from pacer.pacer_io.console import configure_console, reset_console

    configure_console(width=200)
    yield
    reset_console()


@pytest.fixture
def clock():
    return ManualClock(1_000_000)


@pytest.fixture
def two_segments():
    return [
        Segment("spotify:track:a", 0, 60_000, "A"),
        Segment("spotify:track:b", 60_000, 120_000, "B"),
    ]


@pytest.fixture
def timer(clock, two_segments):
    t = PlaybackTimer(clock)
    t.load(two_segments)
    return t


@pytest.fixture
def zwo_path():
    return FIXTURES_DIR / "sweet_spot.zwo"


@pytest.fixture
def catalog_path():
    return FIXTURES_DIR / "catalog.json"
