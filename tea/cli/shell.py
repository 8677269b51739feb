from __future__ import annotations
import logging
from typing import Optional

from .. import fs
from ..config import Settings, load_settings
from ..process import launch
from .console import ShellConsole
from .dispatch import Dispatcher, Launcher
from .editor import LineEditor
from .keys import KeySource, default_key_source
from .loader import discover_commands
from .registry import CommandRegistry
from .script import ScriptRunner
from .state import ShellState
from ..tokenizer import tokenize

logger = logging.getLogger(__name__)

def run(
    keys: Optional[KeySource] = None,
    console: Optional[ShellConsole] = None,
    settings: Optional[Settings] = None,
    state: Optional[ShellState] = None,
    launcher: Launcher = launch,
    registry: Optional[CommandRegistry] = None,
) -> ShellState:
    settings = settings or load_settings()
    console = console or ShellConsole()
    keys = keys or default_key_source()
    state = state or ShellState(show_user_host=settings.show_user_host)

    if registry is None:
        registry = CommandRegistry()
        discover_commands(registry)

    dispatcher = Dispatcher(registry, state, console, launcher)
    scripts = ScriptRunner(dispatcher)
    editor = LineEditor(keys, console, state.history)

    while not state.exit_requested:
        if settings.autostart and fs.is_file(settings.autostart):
            logger.debug("autostart %s", settings.autostart)
            scripts.run_script(settings.autostart)

        console.prompt(state.prompt(), settings.prompt_color)
        try:
            line = editor.read_line()
        except (EOFError, KeyboardInterrupt):
            console.newline()
            break

        if not line.strip():
            state.history.reset_cursor()
            continue

        tokens = tokenize(line)
        try:
            dispatcher.dispatch(tokens)
        except Exception as e:
            logger.debug("command %r raised", tokens[0], exc_info=True)
            console.error(f"[Command Error] {e}")

        state.history.record(line)

    return state
