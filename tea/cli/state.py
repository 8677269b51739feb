from __future__ import annotations
import os
import socket
import getpass
from dataclasses import dataclass, field
from typing import Optional

from .. import fs
from .history import History

@dataclass
class ShellState:
    """
    Everything the shell mutates, owned by the loop and touched only from its thread.
    """
    cwd: str = field(default_factory=fs.current_directory)
    home: str = field(default_factory=fs.home_directory)
    history: History = field(default_factory=History)

    # set by the `exit` built-in; the loop stops after the current line
    exit_requested: bool = False

    # prompt decoration
    show_user_host: bool = False
    user: Optional[str] = None
    host: Optional[str] = None

    def display_cwd(self) -> str:
        home = self.home.rstrip(os.sep) or os.sep
        if self.cwd == home:
            return "~"
        if home != os.sep and self.cwd.startswith(home + os.sep):
            return "~" + self.cwd[len(home):]
        return self.cwd

    def prompt(self) -> str:
        prefix = ""
        if self.show_user_host:
            user = self.user or getpass.getuser()
            host = self.host or socket.gethostname()
            prefix = f"{user}@{host}:"
        return f"{prefix}{self.display_cwd()}> "
