from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..config import load_settings
from .shell import run

__all__ = ["main", "run"]


def main(env_path: Optional[Path] = None) -> None:
    settings = load_settings(env_path)
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    try:
        run(settings=settings)
    except KeyboardInterrupt:
        # Ctrl-C while an external program is running
        print()
