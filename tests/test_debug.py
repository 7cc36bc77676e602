"""Unit tests for connect_four/debug.py"""

from pathlib import Path
from typing import Iterator

import pytest

from connect_four.debug import DebugLevel, DebugManager


@pytest.fixture
def manager(tmp_path: Path) -> Iterator[DebugManager]:
    """A separate manager writing to a temporary log file."""
    manager = DebugManager(name="connect_four.tests")
    manager.configure(log_file=str(tmp_path / "game.log"))
    yield manager
    manager.configure(log_file="")


def read_log(tmp_path: Path) -> str:
    return (tmp_path / "game.log").read_text()


def test_messages_below_level_are_dropped(manager: DebugManager, tmp_path: Path) -> None:
    manager.configure(level=DebugLevel.INFO)
    manager.info("kept", "game")
    manager.debug("dropped", "game")

    log = read_log(tmp_path)
    assert "[game] kept" in log
    assert "dropped" not in log


def test_trace_level(manager: DebugManager, tmp_path: Path) -> None:
    manager.configure(level=DebugLevel.TRACE)
    manager.trace("fine detail", "board")
    assert "TRACE - [board] fine detail" in read_log(tmp_path)


def test_component_filter(manager: DebugManager, tmp_path: Path) -> None:
    manager.configure(level=DebugLevel.DEBUG, components=["win"])
    manager.debug("from win", "win")
    manager.debug("from board", "board")

    log = read_log(tmp_path)
    assert "from win" in log
    assert "from board" not in log


def test_none_level_silences_everything(manager: DebugManager, tmp_path: Path) -> None:
    manager.configure(level=DebugLevel.NONE)
    manager.error("should not appear")
    assert read_log(tmp_path) == ""


def test_set_from_string(manager: DebugManager) -> None:
    assert manager.set_from_string("Debug")
    assert manager.level == DebugLevel.DEBUG
    assert not manager.set_from_string("verbose")
    assert manager.level == DebugLevel.DEBUG


def test_timers(manager: DebugManager) -> None:
    manager.start_timer("win_check")
    elapsed = manager.end_timer("win_check")
    assert elapsed is not None and elapsed >= 0
    assert manager.end_timer("win_check") is None
