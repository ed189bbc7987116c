"""Root logger setup for the pass display.

Level precedence: ``--log-level`` from the CLI, then ``PASSVIEW_LOG_LEVEL``,
then a truthy ``PASSVIEW_DEBUG`` (DEBUG), then INFO. A value that does not
name a level is skipped and reported once logging is up.

Pillow logs every PNG chunk it parses at DEBUG; its loggers are capped at
INFO so debug sessions stay readable.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional, Tuple

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
ENV_LEVEL = "PASSVIEW_LOG_LEVEL"
ENV_DEBUG = "PASSVIEW_DEBUG"
NOISY_LOGGERS: Tuple[str, ...] = ("PIL",)


def parse_level(value: Optional[str]) -> Optional[int]:
    """Return the numeric level for ``"debug"``, ``"WARNING"``, ``"10"``... or None."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    candidate = logging.getLevelName(text.upper())
    return candidate if isinstance(candidate, int) else None


def _env_truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def resolve_level(cli_level: Optional[str] = None) -> Tuple[int, List[str]]:
    """Pick the effective level; also return notes about ignored values."""
    notes: List[str] = []
    for source, raw in (("--log-level", cli_level), (ENV_LEVEL, os.getenv(ENV_LEVEL))):
        if raw is None or not str(raw).strip():
            continue
        level = parse_level(raw)
        if level is not None:
            return level, notes
        notes.append(f"Ignoring {source}={raw!r}: not a log level")
    if _env_truthy(os.getenv(ENV_DEBUG)):
        return logging.DEBUG, notes
    return logging.INFO, notes


def configure_root(cli_level: Optional[str] = None) -> int:
    """Configure the root logger and return the effective level."""
    level, notes = resolve_level(cli_level)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))

    log = logging.getLogger(__name__)
    for note in notes:
        log.warning(note)
    return level
