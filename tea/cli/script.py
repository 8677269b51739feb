from __future__ import annotations
import logging

from .. import fs
from .dispatch import Dispatcher
from ..tokenizer import tokenize

logger = logging.getLogger(__name__)


class ScriptRunner:
    """
    Runs a file of command lines, one per line, in order.

    Every non-blank line goes straight to the external-program path: cd, pwd
    and exit are not treated as built-ins here. A failing line is reported and
    the next one still runs.
    """

    def __init__(self, dispatcher: Dispatcher) -> None:
        self.dispatcher = dispatcher

    def run_script(self, path: str) -> int:
        """Returns the number of lines executed."""
        result = fs.read_lines(path)
        if not result.ok:
            self.dispatcher.console.error(f"Error reading script: {result.message}")
            return 0
        executed = 0
        for lineno, raw in enumerate(result.value, 1):
            line = raw.strip()
            if not line:
                continue
            if line.startswith("~"):
                line = fs.expand_tilde(line, self.dispatcher.state.home)
            tokens = tokenize(line)
            logger.debug("%s:%d %r", path, lineno, tokens)
            self.dispatcher.run_external(tokens)
            executed += 1
        return executed
