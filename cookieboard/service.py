"""
Board Service

Request-facing operations on the shared board. Each operation returns a
transport-neutral response: an HTTP status plus a text body, leaving the
choice of server to the host application.
"""

from dataclasses import dataclass
from http import HTTPStatus
from typing import Optional, Union
import logging

from .board import Board, BoardError, Team
from .config import EngineConfig
from .shared_state import SharedState


logger = logging.getLogger(__name__)


@dataclass
class ServiceResponse:
    """Outcome of a service operation."""
    status: HTTPStatus
    body: str

    @property
    def ok(self) -> bool:
        return self.status == HTTPStatus.OK


class BoardService:
    """
    Operations exposed to the request layer.

    Columns are 1-based here and translated to the board's 0-based indices.
    """

    def __init__(self, state: Optional[SharedState] = None,
                 config: Optional[EngineConfig] = None):
        self.state = state or SharedState(config)

    def get_state(self) -> ServiceResponse:
        """Render the current board."""
        with self.state.read() as state:
            return ServiceResponse(HTTPStatus.OK, state.board.render())

    def reset(self) -> ServiceResponse:
        """Clear the board and re-seed the random stream."""
        with self.state.write() as state:
            state.board.reset()
            state.reset_rng()
            logger.info("Board and random stream reset")
            return ServiceResponse(HTTPStatus.OK, state.board.render())

    def place(self, team: str, column: Union[int, str]) -> ServiceResponse:
        """
        Drop a token for `team` into the 1-based `column`.

        Args:
            team (str): Team token, "cookie" or "milk"
            column (int | str): 1-based column number

        Returns:
            ServiceResponse: BAD_REQUEST for an invalid column or team,
            SERVICE_UNAVAILABLE with the board if the placement is rejected,
            OK with the board otherwise
        """
        with self.state.write() as state:
            board = state.board

            col = _parse_column(column)
            if col is None or col == 0 or col > board.size:
                logger.warning(f"Rejected placement: invalid column {column!r}")
                return ServiceResponse(HTTPStatus.BAD_REQUEST, "Invalid column")

            try:
                parsed_team = Team.from_token(team)
            except ValueError:
                logger.warning(f"Rejected placement: invalid team {team!r}")
                return ServiceResponse(HTTPStatus.BAD_REQUEST, "Invalid team")

            try:
                board.place(parsed_team, col - 1)
            except BoardError as e:
                logger.warning(f"Rejected placement: {e}")
                return ServiceResponse(HTTPStatus.SERVICE_UNAVAILABLE, board.render())

            return ServiceResponse(HTTPStatus.OK, board.render())

    def random_board(self) -> ServiceResponse:
        """
        Render a freshly randomized board drawn from the shared stream.

        The shared board is left untouched.
        """
        with self.state.write() as state:
            board = Board.new_randomized(state.config.random_board_size, state.rng)
            return ServiceResponse(HTTPStatus.OK, board.render())


def _parse_column(column: Union[int, str]) -> Optional[int]:
    """Parse a user-facing column number; None if it is not a non-negative integer."""
    if isinstance(column, bool):
        return None
    try:
        value = int(column)
    except (TypeError, ValueError):
        return None
    if isinstance(column, float) or value < 0:
        return None
    return value
