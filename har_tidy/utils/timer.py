from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

log = logging.getLogger(__name__)


@contextmanager
def timed(section: str, timings: Optional[Dict[str, float]] = None) -> Iterator[None]:
    """Records the wall time of a pipeline stage, also when it raises."""
    start = time.perf_counter()
    try:
        yield
    finally:
        dur = time.perf_counter() - start
        if timings is not None:
            timings[section] = dur
        log.debug("Stage %s took %.3fs", section, dur)
