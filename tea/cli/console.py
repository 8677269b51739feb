from __future__ import annotations
from typing import Optional

from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style
from rich.text import Text

ERASE = "\b \b"


class ShellConsole:
    """
    Output side of the terminal: raw echo for the editor, styled text for the
    shell's own messages, and byte-for-byte program output.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)

    def write(self, text: str) -> None:
        """Write without newline or styling (echo, erase sequences)."""
        self.console.file.write(text)
        self.console.file.flush()

    def erase(self, count: int) -> None:
        if count > 0:
            self.write(ERASE * count)

    def newline(self) -> None:
        self.write("\n")

    def prompt(self, text: str, style: str = "green") -> None:
        self.console.print(Text(text, style=style), end="")
        self.console.file.flush()

    def out(self, text: str) -> None:
        self.console.print(Text(text), soft_wrap=True)

    def error(self, text: str) -> None:
        self.console.print(Text(text, style="red"), soft_wrap=True)

    # Program output keeps its tabs and control characters, so it bypasses
    # rich rendering and only gets wrapped in the style's ANSI codes.
    def program_out(self, text: str) -> None:
        self.write(text + "\n")

    def program_error(self, text: str) -> None:
        self.write(self._styled(text, "red") + "\n")

    def _styled(self, text: str, style: str) -> str:
        system = COLOR_SYSTEMS.get(self.console.color_system or "")
        return Style.parse(style).render(text, color_system=system)
