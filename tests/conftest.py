"""Shared fixtures for shell tests."""

import io

import pytest
from rich.console import Console

from tea.cli.console import ShellConsole
from tea.cli.state import ShellState
from tea.process import LaunchResult


class RecordingLauncher:
    """Launcher stand-in that records calls and returns canned results."""

    def __init__(self, result: LaunchResult | None = None) -> None:
        self.calls: list[tuple[str, str, str | None]] = []
        self.result = result or LaunchResult(True)

    def __call__(self, program: str, arguments: str, cwd: str | None = None) -> LaunchResult:
        self.calls.append((program, arguments, cwd))
        return self.result


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> ShellConsole:
    return ShellConsole(Console(file=output, force_terminal=False, color_system=None, width=200))


@pytest.fixture
def home(tmp_path, monkeypatch):
    """A fake home directory; the process starts inside tmp_path."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.chdir(tmp_path)
    return home_dir


@pytest.fixture
def state(home, tmp_path) -> ShellState:
    return ShellState(cwd=str(tmp_path), home=str(home))


@pytest.fixture
def launcher() -> RecordingLauncher:
    return RecordingLauncher()
