from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

@dataclass
class CommandSpec:
    name: str
    handler: "Command"

class CommandRegistry:
    """Built-in commands keyed by lower-cased name."""

    def __init__(self) -> None:
        self._by_name: Dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        key = spec.name.lower()
        if key in self._by_name and self._by_name[key].handler is not spec.handler:
            raise RuntimeError(f"Duplicate command name: {spec.name}")
        self._by_name[key] = spec

    def get(self, name: str) -> Optional[CommandSpec]:
        return self._by_name.get(name.lower())

class Command:
    name: str = ''

    def run(self, args: list[str], state, console) -> None:
        raise NotImplementedError('Command.run must be implemented')
