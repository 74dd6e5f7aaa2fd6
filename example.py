#!/usr/bin/env python3
"""
Example usage of the cookie-and-milk board.

This script demonstrates how to use the Board class and the BoardService
wrapper, including rejected placements, stalemates and random boards.
"""

import logging

import numpy as np

from cookieboard import Board, BoardError, BoardService, EngineConfig, Team


logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def example_basic_game():
    """Demonstrate a basic game won along the bottom row."""
    print("=== Basic Game ===")

    board = Board()
    print(board)

    moves = [(Team.COOKIE, 0), (Team.MILK, 0), (Team.COOKIE, 1),
             (Team.MILK, 1), (Team.COOKIE, 2), (Team.MILK, 2), (Team.COOKIE, 3)]
    for team, col in moves:
        print(f"{team.name.lower()} plays column {col}")
        board.place(team, col)
        print(board)

        if board.is_game_over():
            break

    print(f"Game result: {board.game_state.value}")
    print("\n" + "="*50 + "\n")


def example_rejected_placements():
    """Demonstrate the three ways a placement is rejected."""
    print("=== Rejected Placements ===")

    board = Board()
    for team in [Team.MILK, Team.COOKIE, Team.MILK, Team.COOKIE]:
        board.place(team, 0)

    def try_place(team, col):
        try:
            board.place(team, col)
        except BoardError as e:
            logger.warning(f"{type(e).__name__}: {e}")

    try_place(Team.COOKIE, 7)
    try_place(Team.COOKIE, 0)

    for _ in range(4):
        board.place(Team.MILK, 1)
    try_place(Team.COOKIE, 2)

    print(board)
    print("\n" + "="*50 + "\n")


def example_stalemate():
    """Demonstrate a full board with no winning line."""
    print("=== Stalemate ===")

    board = Board()
    for col, teams in enumerate([(Team.MILK, Team.COOKIE)] * 2 + [(Team.COOKIE, Team.MILK)] * 2):
        for _ in range(2):
            for team in teams:
                board.place(team, col)

    print(board)
    print("\n" + "="*50 + "\n")


def example_random_boards():
    """Demonstrate reproducible random boards."""
    print("=== Random Boards ===")

    rng = np.random.default_rng(2024)
    for _ in range(2):
        print(Board.new_randomized(4, rng))

    print("Same seed, same first board:")
    print(Board.new_randomized(4, np.random.default_rng(2024)))
    print("\n" + "="*50 + "\n")


def example_service():
    """Demonstrate the request-facing service."""
    print("=== Board Service ===")

    service = BoardService(config=EngineConfig.from_dict({'board_size': 4}))
    for team, column in [("cookie", 1), ("milk", 0), ("chocolate", 2), ("milk", "2")]:
        response = service.place(team, column)
        print(f"place {team} {column!r} -> {response.status.value} {response.status.phrase}")
        print(response.body)

    print(service.random_board().body)
    print(service.reset().body)


def example_interactive_game():
    """Play on stdin. Enter e.g. 'cookie 3' with a 1-based column."""
    print("=== Interactive Game ===")
    print("Enter '<team> <column>' to play, 'q' to quit")

    service = BoardService()
    print(service.get_state().body)

    while not service.state.board.is_game_over():
        try:
            user_input = input("Move: ").strip()
            if user_input.lower() == 'q':
                print("Game quit by user")
                return

            team, column = user_input.split()
            response = service.place(team, column)
            print(response.body)

        except (ValueError, KeyboardInterrupt, EOFError):
            print("Invalid input or interrupted. Exiting...")
            return


def main():
    """Run all examples."""
    print("Cookie-and-Milk Board Examples")
    print("=" * 50)
    print()

    try:
        example_basic_game()
        example_rejected_placements()
        example_stalemate()
        example_random_boards()
        example_service()

        # Uncomment the line below for interactive play
        # example_interactive_game()

    except KeyboardInterrupt:
        print("\nExamples interrupted by user.")


if __name__ == "__main__":
    main()
