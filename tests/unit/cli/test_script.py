"""Tests for running script files."""

import os

import pytest

from tea.cli.dispatch import Dispatcher
from tea.cli.loader import discover_commands
from tea.cli.registry import CommandRegistry
from tea.cli.script import ScriptRunner
from tea.process import LaunchResult


@pytest.fixture
def runner(state, console, launcher) -> ScriptRunner:
    registry = CommandRegistry()
    discover_commands(registry)
    return ScriptRunner(Dispatcher(registry, state, console, launcher))


def write_script(path, text: str) -> str:
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestRunScript:
    """Tests for ScriptRunner.run_script()."""

    def test_runs_lines_in_order_skipping_blanks(self, runner, launcher, tmp_path) -> None:
        script = write_script(tmp_path / "s.tea", "echo hi\n\n   \necho bye\n")
        assert runner.run_script(script) == 2
        assert [(p, a) for p, a, _ in launcher.calls] == [("echo", "hi"), ("echo", "bye")]

    def test_lines_are_trimmed_and_tokenized(self, runner, launcher, tmp_path) -> None:
        script = write_script(tmp_path / "s.tea", '   grep "a b" file.txt   \n')
        runner.run_script(script)
        assert launcher.calls[0][:2] == ("grep", "a b file.txt")

    def test_builtins_not_recognized(self, runner, launcher, state, tmp_path) -> None:
        """cd/pwd/exit inside a script are launched as programs."""
        (tmp_path / "sub").mkdir()
        script = write_script(tmp_path / "s.tea", "cd sub\npwd\nexit\n")
        runner.run_script(script)
        assert [p for p, _, _ in launcher.calls] == ["cd", "pwd", "exit"]
        assert state.cwd == str(tmp_path)
        assert state.exit_requested is False

    def test_leading_tilde_expanded(self, runner, launcher, home, tmp_path) -> None:
        script = write_script(tmp_path / "s.tea", "~/bin/tool --flag\n")
        runner.run_script(script)
        assert launcher.calls[0][:2] == (os.path.join(str(home), "bin/tool"), "--flag")

    def test_missing_file_runs_nothing(self, runner, launcher, tmp_path, output) -> None:
        assert runner.run_script(str(tmp_path / "missing.tea")) == 0
        assert launcher.calls == []
        assert output.getvalue().startswith("Error reading script:")

    def test_failure_does_not_stop_script(self, runner, launcher, tmp_path, output) -> None:
        launcher.result = LaunchResult(False, message="not found")
        script = write_script(tmp_path / "s.tea", "a\nb\n")
        assert runner.run_script(script) == 2
        assert len(launcher.calls) == 2
        assert output.getvalue().count("Error executing command: not found") == 2

    def test_not_recorded_in_history(self, runner, state, tmp_path) -> None:
        runner.run_script(write_script(tmp_path / "s.tea", "echo hi\n"))
        assert len(state.history) == 0
