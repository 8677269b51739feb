from __future__ import annotations
import logging
from typing import Callable, List, Optional

from .. import fs
from ..process import LaunchResult, launch
from .console import ShellConsole
from .registry import CommandRegistry
from .state import ShellState
from ..tokenizer import join_arguments

logger = logging.getLogger(__name__)

Launcher = Callable[[str, str, Optional[str]], LaunchResult]


class Dispatcher:
    """Routes a tokenized command to a built-in, or runs it as an external program."""

    def __init__(
        self,
        registry: CommandRegistry,
        state: ShellState,
        console: ShellConsole,
        launcher: Launcher = launch,
    ) -> None:
        self.registry = registry
        self.state = state
        self.console = console
        self.launcher = launcher

    def dispatch(self, tokens: List[str]) -> None:
        if not tokens:
            return
        spec = self.registry.get(tokens[0])
        if spec is None:
            self.run_external(tokens)
            return
        logger.debug("built-in %s %r", spec.name, tokens[1:])
        spec.handler.run(tokens[1:], self.state, self.console)

    def run_external(self, tokens: List[str]) -> LaunchResult:
        program = fs.expand_tilde(tokens[0], self.state.home)
        arguments = join_arguments(tokens[1:])
        result = self.launcher(program, arguments, self.state.cwd)
        if not result.ok:
            self.console.error(f"Error executing command: {result.message}")
            return result
        if result.stdout.strip():
            self.console.program_out(result.stdout.rstrip("\n"))
        if result.stderr.strip():
            error = result.stderr.rstrip("\n")
            self.console.program_error(f"Error: {error}")
        return result
