from __future__ import annotations
import logging
from typing import List
from ... import fs
from ..registry import Command

logger = logging.getLogger(__name__)

class ChangeDirectory(Command):
    name = 'cd'

    def run(self, args: List[str], state, console) -> None:
        if not args:
            console.out('Usage: cd <directory>')
            return
        target = fs.expand_tilde(args[0], state.home)
        result = fs.change_directory(target)
        if not result.ok:
            console.error(f"Error changing directory: {result.message}")
            return
        state.cwd = result.value
        logger.debug("working directory is now %s", state.cwd)
