"""
Craps Engine - Base Types Tests

Tests for dataclasses, enums and the pass-line rule table.
"""

import pytest
from src.engine.base import (
    CRAPS_TOTALS,
    NATURAL_TOTALS,
    NO_POINT,
    POINT_TOTALS,
    DiceRoll,
    GamePhase,
    GameProperty,
    RoundOutcome,
    classify_roll,
)


class TestDiceRoll:
    """Tests for DiceRoll dataclass."""

    def test_total(self):
        assert DiceRoll(4, 3).total == 7

    def test_values(self):
        assert DiceRoll(2, 5).values == (2, 5)

    def test_str(self):
        assert str(DiceRoll(6, 6)) == "(6, 6) = 12"

    @pytest.mark.parametrize("bad", [0, 7, -1])
    def test_invalid_value_raises(self, bad):
        with pytest.raises(ValueError, match=f"Invalid die value {bad}"):
            DiceRoll(1, bad)

    def test_from_sequence(self):
        assert DiceRoll.from_sequence([3, 4]) == DiceRoll(3, 4)

    def test_from_sequence_wrong_length(self):
        with pytest.raises(ValueError, match="exactly 2 dice"):
            DiceRoll.from_sequence((1, 2, 3))

    def test_frozen(self):
        roll = DiceRoll(1, 2)
        with pytest.raises(AttributeError):
            roll.die1 = 3


class TestRuleTables:
    """Every total from 2 to 12 belongs to exactly one come-out category."""

    def test_partition(self):
        assert CRAPS_TOTALS | NATURAL_TOTALS | POINT_TOTALS == set(range(2, 13))
        assert not CRAPS_TOTALS & NATURAL_TOTALS
        assert not POINT_TOTALS & (CRAPS_TOTALS | NATURAL_TOTALS)


class TestClassifyRoll:
    """Tests for classify_roll()."""

    @pytest.mark.parametrize("total", [2, 3, 12])
    def test_come_out_craps(self, total):
        assert classify_roll(total, NO_POINT) is RoundOutcome.CRAPS

    @pytest.mark.parametrize("total", [7, 11])
    def test_come_out_natural(self, total):
        assert classify_roll(total, NO_POINT) is RoundOutcome.NATURAL

    @pytest.mark.parametrize("total", [4, 5, 6, 8, 9, 10])
    def test_come_out_sets_point(self, total):
        assert classify_roll(total, NO_POINT) is RoundOutcome.POINT_ESTABLISHED

    @pytest.mark.parametrize("point", [4, 5, 6, 8, 9, 10])
    def test_point_made(self, point):
        assert classify_roll(point, point) is RoundOutcome.POINT_MADE

    @pytest.mark.parametrize("point", [4, 5, 6, 8, 9, 10])
    def test_seven_out(self, point):
        assert classify_roll(7, point) is RoundOutcome.SEVEN_OUT

    @pytest.mark.parametrize("total", [2, 3, 11, 12, 4, 9])
    def test_point_phase_no_decision(self, total):
        assert classify_roll(total, 5) is RoundOutcome.NO_DECISION


class TestRoundOutcome:
    """Tests for RoundOutcome helpers."""

    @pytest.mark.parametrize("outcome,ends,won", [
        (RoundOutcome.CRAPS, True, False),
        (RoundOutcome.NATURAL, True, True),
        (RoundOutcome.POINT_MADE, True, True),
        (RoundOutcome.SEVEN_OUT, True, False),
        (RoundOutcome.POINT_ESTABLISHED, False, False),
        (RoundOutcome.NO_DECISION, False, False),
    ])
    def test_flags(self, outcome, ends, won):
        assert outcome.ends_round is ends
        assert outcome.player_won is won


class TestGameProperty:
    """Property names sent to listeners."""

    def test_names(self):
        assert {p.value for p in GameProperty} == {
            "die1", "die2", "point", "bankroll", "currentBet",
            "playerWins", "houseWins", "gameActive", "gameWon",
        }

    def test_compares_equal_to_string(self):
        assert GameProperty.CURRENT_BET == "currentBet"


class TestGamePhase:
    def test_values(self):
        assert GamePhase.COME_OUT.value == "come_out"
        assert GamePhase.POINT.value == "point"
