"""
Craps Engine - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import pytest

from src.engine.craps import CrapsEngine
from src.engine.dice import SequenceDiceProvider, WeightedDiceProvider
from src.engine.events import ChangeRecorder


# =============================================================================
# ROLL TEST DATA
# =============================================================================

@pytest.fixture
def come_out_rolls() -> dict[str, tuple[tuple[int, int], str]]:
    """
    Come-out roll patterns with the expected decision.

    Returns:
        Dict mapping name to (dice, outcome value)
    """
    return {
        "snake_eyes": ((1, 1), "craps"),
        "ace_deuce": ((1, 2), "craps"),
        "boxcars": ((6, 6), "craps"),
        "seven": ((4, 3), "natural"),
        "yo_eleven": ((5, 6), "natural"),
        "four": ((2, 2), "point_established"),
        "five": ((2, 3), "point_established"),
        "six": ((3, 3), "point_established"),
        "eight": ((4, 4), "point_established"),
        "nine": ((4, 5), "point_established"),
        "ten": ((5, 5), "point_established"),
    }


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def engine() -> CrapsEngine:
    """Unfunded engine with seeded weighted dice."""
    return CrapsEngine(dice=WeightedDiceProvider(seed=1234))


@pytest.fixture
def funded_engine(engine: CrapsEngine) -> CrapsEngine:
    """Engine with a bankroll of 100 and no bet."""
    engine.set_bankroll(100)
    return engine


@pytest.fixture
def recorder(funded_engine: CrapsEngine) -> ChangeRecorder:
    """Listener attached to the funded engine after funding."""
    rec = ChangeRecorder()
    funded_engine.add_change_listener(rec)
    return rec


@pytest.fixture
def scripted_engine():
    """Factory for a funded engine whose dice follow a fixed sequence."""
    def _make(*pairs: tuple[int, int], bankroll: int = 100) -> CrapsEngine:
        eng = CrapsEngine(dice=SequenceDiceProvider(pairs))
        eng.set_bankroll(bankroll)
        return eng
    return _make
