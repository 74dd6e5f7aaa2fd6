"""
Shared application state for the board service.

The board and the seeded random stream are shared between request
handlers. Readers may run together; any writer runs alone.
"""

from contextlib import contextmanager
from typing import Iterator, Optional
import logging
import threading

import numpy as np

from .board import Board
from .config import EngineConfig


logger = logging.getLogger(__name__)


class ReadWriteLock:
    """
    Many-readers / single-writer lock.

    Waiting writers block new readers so a steady stream of reads cannot
    starve a write.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting > 0:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers > 0:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class SharedState:
    """
    Board and random stream shared by every request.

    Attributes:
        config (EngineConfig): Configuration the state was built from
        board (Board): The board played through the service
        rng (np.random.Generator): Seeded stream used for random boards
        lock (ReadWriteLock): Guards both board and rng
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.board = Board(self.config.board_size)
        self.rng = np.random.default_rng(self.config.seed)
        self.lock = ReadWriteLock()

    @contextmanager
    def read(self) -> Iterator["SharedState"]:
        with self.lock.read_locked():
            yield self

    @contextmanager
    def write(self) -> Iterator["SharedState"]:
        with self.lock.write_locked():
            yield self

    def reset_rng(self) -> None:
        """Re-seed the random stream with the configured seed."""
        self.rng = np.random.default_rng(self.config.seed)
        logger.debug(f"Random stream re-seeded with {self.config.seed}")
