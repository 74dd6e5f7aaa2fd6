"""
Configuration for the board engine and the service wrapped around it.
"""

from typing import Any, Dict


class EngineConfig:
    """Configuration for the shared board and its random stream."""

    def __init__(self, board_size: int = 4, seed: int = 2024,
                 random_board_size: int = 4):
        # Shared board played through the service
        self.board_size = board_size

        # Random stream; re-seeded with this value whenever the board is reset
        self.seed = seed
        self.random_board_size = random_board_size

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "EngineConfig":
        """
        Build a configuration, overriding defaults with `values`.

        Raises:
            ValueError: If `values` contains an unknown key
        """
        config = cls()
        for key, value in values.items():
            if not hasattr(config, key):
                raise ValueError(f"Unknown configuration key: {key}")
            setattr(config, key, value)
        return config

    def to_dict(self) -> Dict[str, Any]:
        return {
            'board_size': self.board_size,
            'seed': self.seed,
            'random_board_size': self.random_board_size,
        }
