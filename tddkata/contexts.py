"""A request handler that gives up when its request is cancelled."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Callable, Optional, TextIO

logger = logging.getLogger(__name__)

Handler = Callable[[TextIO, Optional[threading.Event]], None]


class Store(ABC):
    """A source of data that honours cancellation."""

    @abstractmethod
    def fetch(self, cancelled: threading.Event) -> str:
        """Return the data, or raise if ``cancelled`` is set before it is ready."""


def server(store: Store) -> Handler:
    """Build a handler that writes the store's data to its writer.

    The handler takes a writer and an optional cancellation event. If the
    fetch fails, for instance because the request was cancelled, the failure
    is logged and nothing is written.
    """

    def handle(writer: TextIO, cancelled: Optional[threading.Event] = None) -> None:
        event = cancelled if cancelled is not None else threading.Event()
        try:
            data = store.fetch(event)
        except Exception as exc:  # any failure means no response
            logger.info("fetch cancelled: %s", exc)
            return
        writer.write(data)

    return handle