"""
Craps Engine - Dice Sources

The engine draws its dice from a DiceProvider. Production play uses the
weighted provider; tests and replays substitute a scripted sequence.
"""

import random
from abc import ABC, abstractmethod
from typing import Sequence

# Face for each outcome of a uniform draw in [0, 9]. Faces 1-3 are loaded:
# P(1)=0.3, P(2)=0.2, P(3)=0.2, P(4)=P(5)=P(6)=0.1
WEIGHTED_FACES: tuple[int, ...] = (1, 1, 1, 2, 2, 3, 3, 4, 5, 6)

FACE_PROBABILITIES: dict[int, float] = {
    face: WEIGHTED_FACES.count(face) / len(WEIGHTED_FACES)
    for face in range(1, 7)
}


def weighted_face(draw: int) -> int:
    """Map a uniform draw in [0, 9] to a die face."""
    if not (0 <= draw < len(WEIGHTED_FACES)):
        raise ValueError(f"Draw must be between 0 and {len(WEIGHTED_FACES) - 1}, got {draw}.")
    return WEIGHTED_FACES[draw]


class DiceProvider(ABC):
    """Abstract interface for dice generation."""

    @abstractmethod
    def roll(self) -> tuple[int, int]:
        """
        Roll two dice.

        Returns:
            tuple[int, int]: (die1, die2) where each is 1-6
        """


class WeightedDiceProvider(DiceProvider):
    """Draws each die independently from the loaded distribution."""

    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        """
        Args:
            rng: Random source to draw from. Takes precedence over seed.
            seed: Seed for a private random source, for reproducible play
        """
        self._rng = rng if rng is not None else random.Random(seed)

    def roll_die(self) -> int:
        return weighted_face(self._rng.randrange(len(WEIGHTED_FACES)))

    def roll(self) -> tuple[int, int]:
        return (self.roll_die(), self.roll_die())


class SequenceDiceProvider(DiceProvider):
    """
    Replays dice rolls from a scripted sequence.

    Raises IndexError when sequence is exhausted.
    """

    def __init__(self, sequence: Sequence[tuple[int, int]]):
        self.sequence = list(sequence)
        self.index = 0

    def roll(self) -> tuple[int, int]:
        if self.index >= len(self.sequence):
            raise IndexError(f"Dice sequence exhausted after {self.index} rolls")

        pair = self.sequence[self.index]
        self.index += 1
        return pair

    def reset(self) -> None:
        """Rewind to the beginning of the sequence."""
        self.index = 0

    @property
    def remaining(self) -> int:
        return len(self.sequence) - self.index
