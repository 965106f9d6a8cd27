"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.game import GameEngine
from src.core.config import Settings
from src.core.shared_types import Color


@pytest.fixture
def settings() -> Settings:
    """Explicit settings, so the tests do not depend on the environment they run in."""
    return Settings(log_level="DEBUG", reject_moves_after_game_over=False)


@pytest.fixture
def engine(settings: Settings) -> GameEngine:
    """Fresh game in the standard starting position."""
    return GameEngine(settings=settings)


@pytest.fixture
def engine_from_fen(settings: Settings) -> Callable[..., GameEngine]:
    """Call the inner function with a piece placement string and the color to move"""

    def _create_engine(placement: str, color_to_move: Color = Color.WHITE) -> GameEngine:
        return GameEngine.from_fen(placement, color_to_move, settings=settings)

    return _create_engine
