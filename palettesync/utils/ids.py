"""
PaletteSync Identifier Utilities
Request ids for tracing and injectable token sources for gradient and
saved-palette identifiers.
"""
import itertools
import threading
import time
import uuid
from datetime import datetime
from typing import Callable

TokenFactory = Callable[[], str]


def generate_request_id(prefix: str = "req") -> str:
    """
    Generate a unique request ID for tracking.

    Args:
        prefix: Short tag naming the kind of request

    Returns:
        Unique request ID string
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_uuid = str(uuid.uuid4())[:8]
    return f"{prefix}-{timestamp}-{short_uuid}"


def timestamp_token() -> str:
    """
    Default uniqueness token: epoch milliseconds plus a short random suffix.

    Two calls in the same millisecond still produce different tokens.
    """
    return f"{int(time.time() * 1000)}{uuid.uuid4().hex[:4]}"


class SequentialTokens:
    """Deterministic token source yielding "1", "2", ... for reproducible output."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            return str(next(self._counter))
