"""Timing of CLI steps such as loading bank datasets."""

from __future__ import annotations

import logging
import time
from typing import Optional

__all__ = ["Timer"]


class Timer:
    """Context manager logging how long a simulator step took.

    Code inside the block may set ``note`` (e.g. how many banks were
    loaded) and it is appended to the log line. A step that raises is
    logged as failed and the exception propagates.
    """

    def __init__(self, step: str, level: int = logging.INFO) -> None:
        self.step = step
        self.level = level
        self.note: Optional[str] = None
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self._start
        if exc_type is not None:
            logging.warning("%s failed after %.3f s: %s", self.step, self.elapsed, exc)
            return
        suffix = f" ({self.note})" if self.note else ""
        logging.log(self.level, "%s took %.3f s%s", self.step, self.elapsed, suffix)
