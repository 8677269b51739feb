# tea/fs.py
"""
Filesystem access for the shell.

Operations that can fail return an FsResult instead of raising, so callers
branch on `result.ok` and print `result.message`.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

_SEPARATORS = tuple(s for s in (os.sep, os.altsep) if s)


@dataclass(frozen=True)
class FsResult:
    ok: bool
    value: Any = None
    message: str = ""


def home_directory() -> str:
    return os.path.expanduser("~")


def current_directory() -> str:
    return os.getcwd()


def expand_tilde(path: str, home: Optional[str] = None) -> str:
    """
    Expand only '~' and '~<sep>...'. Anything else starting with '~'
    (e.g. '~user', '~~') is returned unchanged.
    """
    if not path.startswith("~"):
        return path
    home = home if home is not None else home_directory()
    if path == "~":
        return home
    if path[1:2] in _SEPARATORS:
        return os.path.join(home, path[2:])
    return path


def change_directory(path: str) -> FsResult:
    try:
        os.chdir(path)
    except (OSError, ValueError) as e:
        logger.debug("chdir %r failed: %s", path, e)
        return FsResult(False, message=str(e))
    cwd = os.getcwd()
    logger.debug("chdir -> %s", cwd)
    return FsResult(True, cwd)


def read_lines(path: str) -> FsResult:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError, ValueError) as e:
        return FsResult(False, message=str(e))
    return FsResult(True, text.splitlines())


def is_file(path: str) -> bool:
    return Path(path).is_file()
