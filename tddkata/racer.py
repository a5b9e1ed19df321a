"""Find which of two URLs answers first."""

from __future__ import annotations

import queue
import threading
import urllib.request
from datetime import timedelta
from typing import Union

DEFAULT_TIMEOUT = 10.0

Timeout = Union[float, timedelta]


class RacerTimeoutError(TimeoutError):
    """Raised when neither URL answers within the timeout."""


def _fetch(url: str, done: "queue.Queue[str]") -> None:
    # A failed request still counts as an answer: only the finish matters.
    try:
        with urllib.request.urlopen(url) as response:
            response.read()
    except (OSError, ValueError):
        pass
    done.put(url)


def racer(url1: str, url2: str) -> str:
    """Return whichever URL answers first, waiting at most ten seconds."""
    return configurable_racer(url1, url2, DEFAULT_TIMEOUT)


def configurable_racer(url1: str, url2: str, timeout: Timeout) -> str:
    """Return whichever URL answers first within ``timeout`` seconds.

    Raises RacerTimeoutError if neither finishes in time.
    """
    if isinstance(timeout, timedelta):
        timeout = timeout.total_seconds()
    done: "queue.Queue[str]" = queue.Queue()
    for url in (url1, url2):
        threading.Thread(target=_fetch, args=(url, done), daemon=True).start()
    try:
        return done.get(timeout=max(float(timeout), 0.0))
    except queue.Empty:
        raise RacerTimeoutError(
            f"timed out waiting for {url1} and {url2}"
        ) from None