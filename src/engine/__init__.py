"""
Craps Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, pass-line rules, betting and change notification.
"""

from src.engine.base import (
    DiceRoll,
    GamePhase,
    GameProperty,
    RoundOutcome,
)
from src.engine.craps import CrapsEngine
from src.engine.dice import DiceProvider, SequenceDiceProvider, WeightedDiceProvider
from src.engine.events import ChangeRecorder, PropertyChange
from src.engine.validators import InvalidArgumentError

__all__ = [
    # Data Classes
    "DiceRoll",
    "PropertyChange",
    # Enums
    "GamePhase",
    "GameProperty",
    "RoundOutcome",
    # Dice sources
    "DiceProvider",
    "SequenceDiceProvider",
    "WeightedDiceProvider",
    # Engine
    "CrapsEngine",
    "ChangeRecorder",
    # Errors
    "InvalidArgumentError",
]
