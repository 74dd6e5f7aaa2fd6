"""
Cookie-and-Milk Board Implementation

A square Connect-4 style board where two teams drop tokens into columns.
A team wins by filling a complete row, column, or one of the two main
diagonals. A full board with no winning line ends in a stalemate.
"""

from typing import List, Optional
from enum import Enum
import logging

import numpy as np
from numba import jit


logger = logging.getLogger(__name__)

EMPTY = 0

COOKIE_GLYPH = "\U0001F36A"
MILK_GLYPH = "\U0001F95B"
EMPTY_GLYPH = "⬛"
WALL_GLYPH = "⬜"


class Team(Enum):
    """Enumeration for the two teams. Values double as cell codes."""
    COOKIE = 1
    MILK = 2

    @property
    def glyph(self) -> str:
        return COOKIE_GLYPH if self is Team.COOKIE else MILK_GLYPH

    @classmethod
    def from_token(cls, token: str) -> "Team":
        """
        Parse a lowercase team token ("cookie" or "milk").

        Raises:
            ValueError: If the token does not name a team
        """
        for team in cls:
            if team.name.lower() == token:
                return team
        raise ValueError(f"Invalid team: {token!r}")


class GameState(Enum):
    """Enumeration for game states."""
    NOT_YET_WON = "not_yet_won"
    COOKIE_WINS = "cookie_wins"
    MILK_WINS = "milk_wins"
    STALEMATE = "stalemate"

    @classmethod
    def won(cls, team: Team) -> "GameState":
        return cls.COOKIE_WINS if team is Team.COOKIE else cls.MILK_WINS

    @property
    def winner(self) -> Optional[Team]:
        if self is GameState.COOKIE_WINS:
            return Team.COOKIE
        elif self is GameState.MILK_WINS:
            return Team.MILK
        return None

    @property
    def is_terminal(self) -> bool:
        return self is not GameState.NOT_YET_WON


class BoardError(Exception):
    """Base class for rejected placements. A rejected placement changes nothing."""


class ColumnFullError(BoardError):
    """Every cell in the requested column is occupied."""


class OutOfBoundError(BoardError):
    """The requested column lies outside the board."""


class GameOverError(BoardError):
    """The game has already been won."""


# JIT-compiled utility functions
@jit(nopython=True, cache=True)
def _jit_lowest_empty_row(cells: np.ndarray, col: int, size: int) -> int:
    """
    Find the row a token dropped into `col` lands on.

    Returns:
        int: Highest-indexed empty row, or -1 if the column is full
    """
    for row in range(size - 1, -1, -1):
        if cells[row, col] == 0:
            return row
    return -1


@jit(nopython=True, cache=True)
def _jit_check_win(cells: np.ndarray, row: int, col: int, team_value: int,
                   size: int) -> bool:
    """
    Check whether `team_value` fills the row and column through (row, col),
    or either full diagonal of the board.

    Both diagonals are inspected whole on every call, whether or not
    (row, col) lies on them.
    """
    row_count = 0
    col_count = 0
    diag_count = 0
    anti_diag_count = 0
    for i in range(size):
        if cells[row, i] == team_value:
            row_count += 1
        if cells[i, col] == team_value:
            col_count += 1
        if cells[i, i] == team_value:
            diag_count += 1
        if cells[i, size - 1 - i] == team_value:
            anti_diag_count += 1

    return (row_count == size or col_count == size
            or diag_count == size or anti_diag_count == size)


@jit(nopython=True, cache=True)
def _jit_has_empty_cell(cells: np.ndarray, size: int) -> bool:
    for row in range(size):
        for col in range(size):
            if cells[row, col] == 0:
                return True
    return False


class Board:
    """
    Square cookie-and-milk board.

    Cells are stored in an N x N numpy matrix where:
    - 0 represents an empty cell
    - 1 represents a cookie
    - 2 represents a milk

    Row 0 is the top of the board; dropped tokens fall towards row N-1.

    Attributes:
        size (int): Side length N, fixed at construction
        game_state (GameState): Current state of the game
    """

    DEFAULT_SIZE = 4

    def __init__(self, size: int = DEFAULT_SIZE):
        """
        Initialize an empty board.

        Args:
            size (int): Side length of the board (default: 4)

        Raises:
            ValueError: If size is less than 1
        """
        if size < 1:
            raise ValueError("Board size must be at least 1")

        self._size = int(size)
        self._cells = np.zeros((self._size, self._size), dtype=np.int8)
        self._game_state = GameState.NOT_YET_WON

    @classmethod
    def new_randomized(cls, size: int, rng: np.random.Generator) -> "Board":
        """
        Build a board where every cell holds a cookie or a milk with equal
        probability.

        Placement rules are bypassed and the game state is not evaluated, so
        the result is always NOT_YET_WON even if a line happens to be filled.

        Args:
            size (int): Side length of the board
            rng (np.random.Generator): Random stream owned by the caller

        Returns:
            Board: The randomized board
        """
        board = cls(size)
        board._cells[:, :] = rng.integers(Team.COOKIE.value, Team.MILK.value + 1,
                                          size=(board._size, board._size))
        return board

    @property
    def size(self) -> int:
        return self._size

    @property
    def game_state(self) -> GameState:
        return self._game_state

    def get_board(self) -> List[List[int]]:
        """
        Get a copy of the cell codes.

        Returns:
            List[List[int]]: A copy of the board
        """
        return self._cells.tolist()

    def get_cell(self, row: int, col: int) -> Optional[Team]:
        value = int(self._cells[row, col])
        return None if value == EMPTY else Team(value)

    def get_valid_moves(self) -> List[int]:
        """
        Get all columns that accept a placement.

        Returns:
            List[int]: List of valid column indices (0-based)
        """
        if self.is_game_over():
            return []
        return [col for col in range(self._size) if not self._column_is_full(col)]

    def is_valid_move(self, col: int) -> bool:
        if self.is_game_over():
            return False
        if col < 0 or col >= self._size:
            return False
        return not self._column_is_full(col)

    def place(self, team: Team, col: int) -> GameState:
        """
        Drop a token for `team` into column `col`.

        Args:
            team (Team): Team placing the token
            col (int): Column index (0-based)

        Returns:
            GameState: State of the game after the placement

        Raises:
            GameOverError: If the game has already been won
            OutOfBoundError: If col is outside [0, size)
            ColumnFullError: If the column has no empty cell
        """
        if self._game_state.winner is not None:
            raise GameOverError(f"Game already won by {self._game_state.winner.name.lower()}")
        if col < 0 or col >= self._size:
            raise OutOfBoundError(f"Column {col} is outside the board")
        if self._column_is_full(col):
            raise ColumnFullError(f"Column {col} is full")

        row = _jit_lowest_empty_row(self._cells, col, self._size)
        self._cells[row, col] = team.value
        logger.debug(f"{team.name.lower()} placed at row {row}, column {col}")

        self._game_state = self._update_game_state(team, row, col)
        if self._game_state.is_terminal:
            logger.info(f"Game ended: {self._game_state.value}")

        return self._game_state

    def _column_is_full(self, col: int) -> bool:
        return bool(np.all(self._cells[:, col] != EMPTY))

    def _update_game_state(self, team: Team, row: int, col: int) -> GameState:
        """
        Derive the game state after `team` has been placed at (row, col).
        """
        if _jit_check_win(self._cells, row, col, team.value, self._size):
            return GameState.won(team)
        if _jit_has_empty_cell(self._cells, self._size):
            return GameState.NOT_YET_WON
        return GameState.STALEMATE

    def get_winner(self) -> Optional[Team]:
        return self._game_state.winner

    def is_game_over(self) -> bool:
        return self._game_state.is_terminal

    def reset(self) -> None:
        """Reset the board to its initial empty state."""
        self._cells = np.zeros((self._size, self._size), dtype=np.int8)
        self._game_state = GameState.NOT_YET_WON
        logger.info(f"Board reset ({self._size}x{self._size})")

    def render(self) -> str:
        """
        Text representation of the board.

        Each row is walled left and right, followed by a bottom wall and,
        once the game is over, a result line.

        Returns:
            str: Visual representation of the board
        """
        result = []

        for row in self._cells:
            cells = "".join(_cell_glyph(int(cell)) for cell in row)
            result.append(f"{WALL_GLYPH}{cells}{WALL_GLYPH}")

        result.append(WALL_GLYPH * (self._size + 2))

        winner = self.get_winner()
        if winner is not None:
            result.append(f"{winner.glyph} wins!")
        elif self._game_state is GameState.STALEMATE:
            result.append("No winner.")

        return "\n".join(result) + "\n"

    def __str__(self) -> str:
        return self.render()


def _cell_glyph(value: int) -> str:
    if value == EMPTY:
        return EMPTY_GLYPH
    return Team(value).glyph
