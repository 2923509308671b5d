"""Simulation configuration management."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


DEFAULT_NUM_ROWS = 3
DEFAULT_MAX_NUMBERS = 15


def _int_from_env(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


@dataclass
class SimulationConfig:
    """Configuration for the LFU page replacement simulation."""

    num_rows: int = DEFAULT_NUM_ROWS
    max_numbers: int = DEFAULT_MAX_NUMBERS

    @classmethod
    def from_env(cls) -> 'SimulationConfig':
        """
        Create config from environment variables.

        Reads LFU_NUM_ROWS and LFU_MAX_NUMBERS.

        Returns:
            SimulationConfig instance

        Raises:
            ValueError: If a variable is set but is not a positive integer
        """
        return cls(
            num_rows=_int_from_env('LFU_NUM_ROWS', DEFAULT_NUM_ROWS, 1),
            max_numbers=_int_from_env('LFU_MAX_NUMBERS', DEFAULT_MAX_NUMBERS, 1),
        )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            'num_rows': self.num_rows,
            'max_numbers': self.max_numbers,
        }
