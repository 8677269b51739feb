from __future__ import annotations
from ..registry import Command

class Pwd(Command):
    name = 'pwd'

    def run(self, args, state, console) -> None:
        console.out(state.cwd)
