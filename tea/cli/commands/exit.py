from __future__ import annotations
from ..registry import Command

class Exit(Command):
    name = 'exit'

    def run(self, args, state, console) -> None:
        state.exit_requested = True
