"""Count down from three to "Go!", sleeping between lines."""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, TextIO

FINAL_WORD = "Go!"
COUNTDOWN_START = 3


class Sleeper(ABC):
    """Something that pauses between countdown steps."""

    @abstractmethod
    def sleep(self) -> None:
        """Pause once."""


@dataclass
class ConfigurableSleeper(Sleeper):
    """Sleeps for ``duration`` seconds using ``sleep_fn``."""

    duration: float = 1.0
    sleep_fn: Callable[[float], None] = time.sleep

    def sleep(self) -> None:
        self.sleep_fn(self.duration)


def countdown(writer: TextIO, sleeper: Sleeper) -> None:
    """Write 3, 2, 1 on separate lines, sleeping after each, then "Go!"."""
    for number in range(COUNTDOWN_START, 0, -1):
        writer.write(f"{number}\n")
        sleeper.sleep()
    writer.write(FINAL_WORD)


def main(argv: Optional[List[str]] = None) -> None:
    """Count down on standard output, one second per step."""
    countdown(sys.stdout, ConfigurableSleeper(1.0, time.sleep))