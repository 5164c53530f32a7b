"""Error and developer-hint reporting with the caller's code location."""

from __future__ import annotations

import inspect
import logging
import os
from typing import Optional

logger = logging.getLogger("panekit")

HINTS_ENV = "PANEKIT_HINTS"


def _caller_location(depth: int) -> Optional[str]:
    frame = inspect.currentframe()
    try:
        # Skip this helper and the public function that called it.
        for _ in range(depth + 1):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None
        return f"{frame.f_code.co_filename}:{frame.f_lineno}"
    finally:
        del frame


def log_error(reason: str, err: Optional[BaseException]) -> None:
    """Log an error with its cause, if any, and the calling code location."""
    logger.error("Error: %s", reason)
    if err is not None:
        logger.error("  Cause: %s", err)
    location = _caller_location(1)
    if location is not None:
        logger.error("  At: %s", location)


def _hints_enabled() -> bool:
    return os.environ.get(HINTS_ENV, "").lower() not in ("", "0", "false", "no")


def log_hint(reason: str) -> None:
    """Log a developer hint when hints are enabled.

    Hints are enabled by setting the PANEKIT_HINTS environment variable.
    The location reported is the caller of the function that asked for the
    hint, which is where the offending object was created.
    """
    if not _hints_enabled():
        return
    logger.warning("Hint: %s", reason)
    location = _caller_location(2)
    if location is not None:
        logger.warning("  Created at: %s", location)