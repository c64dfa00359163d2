"""Shell configuration: .env loading and CLI defaults.

WHY: Defaults such as the output format or whether to emit colour markup
differ between workflows (a broadcaster's archive job vs. a fan subber's
desktop). Keeping them in the environment / a .env file lets each
workflow set them once instead of repeating flags.

HOW: python-dotenv loads the .env file on import. load_settings() reads
the TTML2SRT_* variables into a Settings dataclass that the CLI passes
explicitly to the code that needs it.

RULES:
- Only the CLI imports this module; the conversion core never does
- Every variable is optional; defaults are SRT output, styles on,
  offset correction on and output into the current directory
- Invalid values raise ValueError with the variable name in the message
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ttml2srt.formatters import DEFAULT_FORMAT, FORMATTERS

# Load .env from the working directory
load_dotenv()

APP_NAME = "ttml2srt"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Settings:
    """Resolved CLI defaults.

    RULES:
    - output_format: key of FORMATTERS
    - output_dir: None means the current working directory
    - log_level: numeric logging level
    """

    output_format: str = DEFAULT_FORMAT
    styles_enabled: bool = True
    hour_offset_correction: bool = True
    output_dir: Optional[str] = None
    log_level: int = logging.WARNING


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError("{} must be true or false, got {!r}".format(name, raw))


def _env_log_level(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip().upper()
    if not raw:
        return default
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError("{} is not a logging level: {!r}".format(name, raw))
    return level


def load_settings() -> Settings:
    """Build Settings from TTML2SRT_* environment variables.

    Raises:
        ValueError: If a variable holds an unusable value.
    """
    output_format = os.getenv("TTML2SRT_FORMAT", DEFAULT_FORMAT).strip().lower()
    if output_format not in FORMATTERS:
        raise ValueError(
            "TTML2SRT_FORMAT must be one of {}, got {!r}".format(
                ", ".join(sorted(FORMATTERS)), output_format
            )
        )

    return Settings(
        output_format=output_format,
        styles_enabled=not _env_bool("TTML2SRT_DISABLE_STYLES", False),
        hour_offset_correction=_env_bool("TTML2SRT_HOUR_OFFSET", True),
        output_dir=os.getenv("TTML2SRT_OUTPUT_DIR") or None,
        log_level=_env_log_level("TTML2SRT_LOG_LEVEL", logging.WARNING),
    )
