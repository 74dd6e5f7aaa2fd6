"""
Cookie-and-Milk Board Package

A square Connect-4 style board engine with a thread-safe service wrapper.
"""

from .board import (
    Board, Team, GameState,
    BoardError, ColumnFullError, OutOfBoundError, GameOverError,
)
from .config import EngineConfig
from .shared_state import ReadWriteLock, SharedState
from .service import BoardService, ServiceResponse

__all__ = [
    'Board', 'Team', 'GameState',
    'BoardError', 'ColumnFullError', 'OutOfBoundError', 'GameOverError',
    'EngineConfig', 'ReadWriteLock', 'SharedState',
    'BoardService', 'ServiceResponse',
]
__version__ = '1.0.0'
