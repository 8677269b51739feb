# tea/process.py
"""
External program launcher.

The program runs to completion with stdout and stderr captured; nothing is
streamed while it runs and there is no timeout.
"""

from __future__ import annotations
import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from typing import List, Optional

from .tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LaunchResult:
    ok: bool
    stdout: str = ""
    stderr: str = ""
    returncode: Optional[int] = None
    message: str = ""


def build_argv(program: str, arguments: str) -> List[str]:
    # The argument line is re-split with the same quote rules the shell reads with.
    return [program] + tokenize(arguments)


def resolve_program(program: str, cwd: Optional[str] = None) -> str:
    """
    A bare name that is not on PATH runs from the working directory when a
    file of that name exists there.
    """
    if not program or os.sep in program or (os.altsep and os.altsep in program):
        return program
    if shutil.which(program):
        return program
    local = os.path.join(cwd or os.getcwd(), program)
    if os.path.isfile(local):
        return local
    return program


def launch(program: str, arguments: str = "", cwd: Optional[str] = None) -> LaunchResult:
    argv = build_argv(resolve_program(program, cwd), arguments)
    logger.debug("launch %r", argv)
    try:
        proc = subprocess.run(
            argv,
            cwd=cwd,
            capture_output=True,
            text=True,
            errors="replace",
        )
    except (OSError, ValueError) as e:
        logger.debug("launch of %r failed: %s", program, e)
        return LaunchResult(False, message=str(e))
    logger.debug("%s exited with %s", program, proc.returncode)
    return LaunchResult(True, proc.stdout or "", proc.stderr or "", proc.returncode)
