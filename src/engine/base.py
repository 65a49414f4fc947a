"""
Craps Engine - Base Types

This module defines the value types and enums shared by the dice sources,
the validators and the engine itself. Value types are frozen dataclasses so
a roll can be handed to observers without risk of mutation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


# Rule tables for pass-line Craps
CRAPS_TOTALS = frozenset({2, 3, 12})
NATURAL_TOTALS = frozenset({7, 11})
POINT_TOTALS = frozenset({4, 5, 6, 8, 9, 10})
SEVEN = 7

# Winnings credited on a win, as a multiple of the wager (stake + even money)
WIN_PAYOUT_MULTIPLIER = 2

NO_POINT = 0
DIE_FACES = 6


class GamePhase(Enum):
    """Phase of the current round, derived from the point."""
    COME_OUT = "come_out"  # No point established
    POINT = "point"        # Rolling to repeat the point before a 7


class RoundOutcome(Enum):
    """What a single roll decided."""
    CRAPS = "craps"              # Come-out 2, 3 or 12: house wins
    NATURAL = "natural"          # Come-out 7 or 11: player wins
    POINT_ESTABLISHED = "point_established"
    POINT_MADE = "point_made"    # Point repeated: player wins
    SEVEN_OUT = "seven_out"      # 7 during point phase: house wins
    NO_DECISION = "no_decision"  # Any other point-phase total

    @property
    def ends_round(self) -> bool:
        """True if the roll resolved the round."""
        return self in _RESOLVING_OUTCOMES

    @property
    def player_won(self) -> bool:
        """True if the roll resolved the round in the player's favour."""
        return self in (RoundOutcome.NATURAL, RoundOutcome.POINT_MADE)


_RESOLVING_OUTCOMES = frozenset({
    RoundOutcome.CRAPS,
    RoundOutcome.NATURAL,
    RoundOutcome.POINT_MADE,
    RoundOutcome.SEVEN_OUT,
})


class GameProperty(str, Enum):
    """Names of the observable engine properties, as sent to listeners."""
    DIE1 = "die1"
    DIE2 = "die2"
    POINT = "point"
    BANKROLL = "bankroll"
    CURRENT_BET = "currentBet"
    PLAYER_WINS = "playerWins"
    HOUSE_WINS = "houseWins"
    GAME_ACTIVE = "gameActive"
    GAME_WON = "gameWon"


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a two-dice roll.

    Attributes:
        die1: Face value of the first die
        die2: Face value of the second die
    """
    die1: int
    die2: int

    def __post_init__(self) -> None:
        """Validate dice values are within valid range."""
        for value in (self.die1, self.die2):
            if not (1 <= value <= DIE_FACES):
                raise ValueError(
                    f"Invalid die value {value}. Must be between 1 and {DIE_FACES}."
                )

    @property
    def total(self) -> int:
        return self.die1 + self.die2

    @property
    def values(self) -> tuple[int, int]:
        return (self.die1, self.die2)

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceRoll":
        """Create a DiceRoll from any two-element sequence."""
        if len(values) != 2:
            raise ValueError(f"A craps roll needs exactly 2 dice, got {len(values)}.")
        return cls(die1=values[0], die2=values[1])

    def __str__(self) -> str:
        return f"({self.die1}, {self.die2}) = {self.total}"


def classify_roll(total: int, point: int) -> RoundOutcome:
    """
    Apply pass-line rules to a roll total.

    Args:
        total: Sum of the two dice
        point: Current point, or NO_POINT during the come-out phase

    Returns:
        The RoundOutcome this total produces in the given phase
    """
    if point == NO_POINT:
        if total in CRAPS_TOTALS:
            return RoundOutcome.CRAPS
        if total in NATURAL_TOTALS:
            return RoundOutcome.NATURAL
        return RoundOutcome.POINT_ESTABLISHED

    if total == point:
        return RoundOutcome.POINT_MADE
    if total == SEVEN:
        return RoundOutcome.SEVEN_OUT
    return RoundOutcome.NO_DECISION
