# tea/config.py
"""
Settings read from the environment, with a .env file as a fallback source.

    TEA_AUTOSTART         script run at the start of every prompt (default ~/.tea/autostart, '' disables)
    TEA_PROMPT_USER_HOST  1/true/yes to prefix the prompt with user@host:
    TEA_PROMPT_COLOR      rich colour for the prompt (default green)
    TEA_LOG_LEVEL         logging level name (default WARNING)
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_AUTOSTART = "~/.tea/autostart"

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    autostart: Optional[str] = None
    show_user_host: bool = False
    prompt_color: str = "green"
    log_level: str = "WARNING"


def _log_level(name: str) -> str:
    name = name.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return "WARNING"


def load_settings(env_path: Optional[Path] = None) -> Settings:
    # values already in the environment win over the .env file
    load_dotenv(env_path or Path.cwd() / ".env", override=False)

    autostart = os.getenv("TEA_AUTOSTART", DEFAULT_AUTOSTART).strip()
    return Settings(
        autostart=os.path.expanduser(autostart) if autostart else None,
        show_user_host=os.getenv("TEA_PROMPT_USER_HOST", "").strip().lower() in _TRUE,
        prompt_color=os.getenv("TEA_PROMPT_COLOR", "green").strip() or "green",
        log_level=_log_level(os.getenv("TEA_LOG_LEVEL", "WARNING")),
    )
