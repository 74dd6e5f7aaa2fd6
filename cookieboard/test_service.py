"""
Test suite for the board service and its shared state.
"""

from http import HTTPStatus
import threading

import pytest
from cookieboard.board import Board, GameState, Team, COOKIE_GLYPH, MILK_GLYPH
from cookieboard.config import EngineConfig
from cookieboard.service import BoardService
from cookieboard.shared_state import ReadWriteLock, SharedState


class TestBoardService:
    """Test service operations and their status mapping."""

    def test_initial_state(self):
        """Test that a new service renders an empty board."""
        service = BoardService()
        response = service.get_state()
        assert response.status == HTTPStatus.OK
        assert response.ok
        assert response.body == Board().render()

    def test_place_success(self):
        """Test a successful placement with a 1-based column."""
        service = BoardService()
        response = service.place("cookie", 1)

        assert response.status == HTTPStatus.OK
        assert response.body == service.get_state().body
        assert service.state.board.get_cell(3, 0) == Team.COOKIE

    def test_place_column_as_text(self):
        """Test that numeric path segments are accepted."""
        service = BoardService()
        assert service.place("milk", "4").status == HTTPStatus.OK
        assert service.state.board.get_cell(3, 3) == Team.MILK

    @pytest.mark.parametrize("column", [0, 5, -1, "0", "abc", "", None, 2.0])
    def test_invalid_column(self, column):
        """Test columns outside [1, N] or not integers."""
        service = BoardService()
        response = service.place("cookie", column)
        assert response.status == HTTPStatus.BAD_REQUEST
        assert response.body == "Invalid column"
        assert service.get_state().body == Board().render()

    @pytest.mark.parametrize("team", ["chocolate", "Cookie", "MILK", ""])
    def test_invalid_team(self, team):
        """Test unknown team tokens."""
        service = BoardService()
        response = service.place(team, 1)
        assert response.status == HTTPStatus.BAD_REQUEST
        assert response.body == "Invalid team"

    def test_column_checked_before_team(self):
        """Test that an invalid column is reported before an invalid team."""
        response = BoardService().place("chocolate", 9)
        assert response.body == "Invalid column"

    def test_column_full(self):
        """Test that overflowing a column is unavailable and shows the board."""
        service = BoardService()
        for team in ["cookie", "milk", "cookie", "milk"]:
            assert service.place(team, 2).status == HTTPStatus.OK

        board_before = service.get_state().body
        response = service.place("cookie", 2)
        assert response.status == HTTPStatus.SERVICE_UNAVAILABLE
        assert response.body == board_before

    def test_winning_move_is_ok(self):
        """Test that the move that wins is still reported as OK."""
        service = BoardService()
        for column in range(1, 4):
            service.place("milk", column)

        response = service.place("milk", 4)
        assert response.status == HTTPStatus.OK
        assert response.body.endswith(f"{MILK_GLYPH} wins!\n")
        assert service.state.board.game_state == GameState.MILK_WINS

    def test_game_over(self):
        """Test that placing after a win is unavailable."""
        service = BoardService()
        for column in range(1, 5):
            service.place("cookie", column)

        response = service.place("milk", 1)
        assert response.status == HTTPStatus.SERVICE_UNAVAILABLE
        assert response.body.endswith(f"{COOKIE_GLYPH} wins!\n")

    def test_reset(self):
        """Test that reset clears the board."""
        service = BoardService()
        for column in range(1, 5):
            service.place("cookie", column)

        response = service.reset()
        assert response.status == HTTPStatus.OK
        assert response.body == Board().render()
        assert service.place("milk", 1).status == HTTPStatus.OK

    def test_custom_board_size(self):
        """Test a service configured for a larger board."""
        service = BoardService(config=EngineConfig(board_size=6))
        assert service.place("cookie", 6).status == HTTPStatus.OK
        assert service.place("cookie", 7).body == "Invalid column"


class TestRandomBoards:
    """Test random boards drawn through the service."""

    def test_reproducible_across_services(self):
        """Test that identically configured services draw the same boards."""
        first = BoardService()
        second = BoardService()
        assert first.random_board().body == second.random_board().body
        assert first.random_board().body == second.random_board().body

    def test_reset_restarts_stream(self):
        """Test that reset re-seeds the random stream."""
        service = BoardService()
        drawn = [service.random_board().body for _ in range(3)]

        service.reset()
        assert [service.random_board().body for _ in range(3)] == drawn

    def test_shared_board_untouched(self):
        """Test that a random board does not replace the shared board."""
        service = BoardService()
        service.place("milk", 3)
        before = service.get_state().body

        response = service.random_board()
        assert response.status == HTTPStatus.OK
        assert service.get_state().body == before

    def test_random_board_size(self):
        """Test the configured random board size."""
        service = BoardService(config=EngineConfig(random_board_size=5))
        lines = service.random_board().body.splitlines()
        assert len(lines) == 6
        assert "wins!" not in lines[-1]


class TestSharedState:
    """Test the shared state container."""

    def test_defaults(self):
        state = SharedState()
        assert state.board.size == 4
        assert state.config.seed == 2024

    def test_reset_rng(self):
        """Test that re-seeding restarts the stream."""
        state = SharedState(EngineConfig(seed=11))
        first = state.rng.integers(0, 1000, size=10).tolist()
        state.reset_rng()
        assert state.rng.integers(0, 1000, size=10).tolist() == first

    def test_board_reset_leaves_rng(self):
        """Test that resetting the board alone does not re-seed the stream."""
        state = SharedState()
        state.rng.integers(0, 2, size=100)
        position = state.rng.bit_generator.state
        state.board.reset()
        assert state.rng.bit_generator.state == position


class TestReadWriteLock:
    """Test reader/writer exclusion."""

    def test_concurrent_readers(self):
        """Test that two readers can hold the lock together."""
        lock = ReadWriteLock()
        inside = threading.Event()

        def reader():
            with lock.read_locked():
                inside.set()

        with lock.read_locked():
            thread = threading.Thread(target=reader)
            thread.start()
            assert inside.wait(2.0)
        thread.join()

    def test_writer_excludes_reader(self):
        """Test that a reader waits for the writer to finish."""
        lock = ReadWriteLock()
        acquired = threading.Event()

        def reader():
            with lock.read_locked():
                acquired.set()

        with lock.write_locked():
            thread = threading.Thread(target=reader)
            thread.start()
            assert not acquired.wait(0.2)
        assert acquired.wait(2.0)
        thread.join()

    def test_reader_excludes_writer(self):
        """Test that a writer waits for readers to finish."""
        lock = ReadWriteLock()
        acquired = threading.Event()

        def writer():
            with lock.write_locked():
                acquired.set()

        with lock.read_locked():
            thread = threading.Thread(target=writer)
            thread.start()
            assert not acquired.wait(0.2)
        assert acquired.wait(2.0)
        thread.join()

    def test_released_on_error(self):
        """Test that the write lock is released when the body raises."""
        lock = ReadWriteLock()
        with pytest.raises(RuntimeError):
            with lock.write_locked():
                raise RuntimeError("boom")

        acquired = threading.Event()

        def reader():
            with lock.read_locked():
                acquired.set()

        thread = threading.Thread(target=reader)
        thread.start()
        assert acquired.wait(2.0)
        thread.join()


class TestEngineConfig:
    """Test configuration defaults and overrides."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.to_dict() == {'board_size': 4, 'seed': 2024, 'random_board_size': 4}

    def test_from_dict(self):
        config = EngineConfig.from_dict({'board_size': 6, 'seed': 1})
        assert config.board_size == 6
        assert config.seed == 1
        assert config.random_board_size == 4

    def test_unknown_key(self):
        with pytest.raises(ValueError):
            EngineConfig.from_dict({'rows': 6})


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
