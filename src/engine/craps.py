"""
Craps Engine - Pass-Line Game

Stateful engine for a single player's Craps session. Tracks dice, point,
bankroll, the outstanding bet and the win tallies, applies pass-line rules
on every roll, and notifies registered listeners of each state change.

Game Rules:
- Come-out roll: 7 or 11 wins (natural), 2, 3 or 12 loses (craps),
  anything else becomes the point
- Point phase: repeat the point to win, roll a 7 to lose (seven-out)
- A win pays the stake back plus an equal amount
"""

from __future__ import annotations

import logging

from src.engine.base import (
    NO_POINT,
    WIN_PAYOUT_MULTIPLIER,
    DiceRoll,
    GamePhase,
    GameProperty,
    RoundOutcome,
    classify_roll,
)
from src.engine.dice import DiceProvider, WeightedDiceProvider
from src.engine.events import ChangeListener, ChangeSupport
from src.engine.validators import validate_bankroll, validate_bet, validate_die_value

logger = logging.getLogger(__name__)


class CrapsEngine:
    """
    Owns all mutable game state for one session.

    Not thread-safe: use one engine per session and call it from a
    single thread.
    """

    def __init__(self, dice: DiceProvider | None = None) -> None:
        self._dice = dice if dice is not None else WeightedDiceProvider()
        self._changes = ChangeSupport()
        self._next_roll: DiceRoll | None = None

        self._die1 = 0
        self._die2 = 0
        self._point = NO_POINT
        self._player_wins = 0
        self._house_wins = 0
        self._game_active = False
        self._game_won = False
        self._bankroll = 0
        self._current_bet = 0

        self._last_roll: DiceRoll | None = None
        self._last_outcome: RoundOutcome | None = None

    # -- Accessors -------------------------------------------------------

    @property
    def die1(self) -> int:
        return self._die1

    @property
    def die2(self) -> int:
        return self._die2

    @property
    def point(self) -> int:
        """The point to repeat, or 0 when no point is established."""
        return self._point

    @property
    def bankroll(self) -> int:
        return self._bankroll

    @property
    def current_bet(self) -> int:
        return self._current_bet

    @property
    def player_wins(self) -> int:
        return self._player_wins

    @property
    def house_wins(self) -> int:
        return self._house_wins

    @property
    def game_active(self) -> bool:
        return self._game_active

    @property
    def game_won(self) -> bool:
        """Whether the most recently completed round was won by the player."""
        return self._game_won

    @property
    def phase(self) -> GamePhase:
        return GamePhase.COME_OUT if self._point == NO_POINT else GamePhase.POINT

    @property
    def last_roll(self) -> DiceRoll | None:
        return self._last_roll

    @property
    def last_outcome(self) -> RoundOutcome | None:
        return self._last_outcome

    def can_continue_playing(self) -> bool:
        """True while the player has funds left to bet."""
        return self._bankroll > 0

    # -- Listeners -------------------------------------------------------

    def add_change_listener(self, listener: ChangeListener) -> None:
        """Register a callback receiving (property_name, old_value, new_value)."""
        self._changes.add(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        self._changes.remove(listener)

    # -- Bankroll and betting --------------------------------------------

    def set_bankroll(self, amount: int) -> None:
        """Fund the session, replacing the current bankroll.

        Raises:
            InvalidArgumentError: If amount is negative
        """
        validate_bankroll(amount)

        old_bankroll = self._bankroll
        self._bankroll = amount
        logger.info("Bankroll set to %d", amount)

        self._changes.fire(GameProperty.BANKROLL, old_bankroll, self._bankroll)

    def place_bet(self, amount: int) -> None:
        """Wager an amount, deducting it from the bankroll.

        Raises:
            InvalidArgumentError: If amount is negative or exceeds the bankroll
        """
        validate_bet(amount, self._bankroll)

        old_bankroll = self._bankroll
        old_bet = self._current_bet

        self._bankroll -= amount
        self._current_bet = amount
        logger.info("Bet placed: %d (bankroll now %d)", amount, self._bankroll)

        self._changes.fire(GameProperty.BANKROLL, old_bankroll, self._bankroll)
        self._changes.fire(GameProperty.CURRENT_BET, old_bet, self._current_bet)

    def credit_win(self) -> None:
        """Pay out the current bet (stake plus even money) and clear it."""
        winnings = self._current_bet * WIN_PAYOUT_MULTIPLIER

        old_bankroll = self._bankroll
        old_bet = self._current_bet

        self._bankroll += winnings
        self._current_bet = 0

        self._changes.fire(GameProperty.BANKROLL, old_bankroll, self._bankroll)
        self._changes.fire(GameProperty.CURRENT_BET, old_bet, self._current_bet)

    def reset_bet(self) -> None:
        """Clear the current bet without paying it out."""
        old_bet = self._current_bet
        self._current_bet = 0
        self._changes.fire(GameProperty.CURRENT_BET, old_bet, self._current_bet)

    def reset_session(self) -> None:
        """Return the session to its starting state.

        Point, active and won flags are cleared silently; listeners only
        hear about the tallies, the bankroll and the bet.
        """
        self._player_wins = 0
        self._house_wins = 0
        self._bankroll = 0
        self._current_bet = 0
        self._point = NO_POINT
        self._game_active = False
        self._game_won = False
        self._next_roll = None
        self._last_outcome = None
        logger.info("Session reset")

        self._changes.fire(GameProperty.PLAYER_WINS, None, 0)
        self._changes.fire(GameProperty.HOUSE_WINS, None, 0)
        self._changes.fire(GameProperty.BANKROLL, None, 0)
        self._changes.fire(GameProperty.CURRENT_BET, None, 0)

    # -- Rolling ---------------------------------------------------------

    def set_next_roll(self, die1: int, die2: int) -> None:
        """Queue the dice for the next roll only, bypassing the dice provider.

        Intended for deterministic test scenarios.

        Raises:
            InvalidArgumentError: If either value is outside 1-6
        """
        validate_die_value(die1)
        validate_die_value(die2)
        self._next_roll = DiceRoll(die1, die2)

    def _draw(self) -> DiceRoll:
        if self._next_roll is not None:
            roll, self._next_roll = self._next_roll, None
            return roll
        return DiceRoll.from_sequence(self._dice.roll())

    def roll(self) -> RoundOutcome:
        """Roll both dice and apply pass-line rules.

        Returns:
            What the roll decided for the current round
        """
        if not self._game_active:
            self._game_active = True

        old_die1 = self._die1
        old_die2 = self._die2
        old_point = self._point

        roll = self._draw()
        self._die1 = roll.die1
        self._die2 = roll.die2
        self._last_roll = roll

        self._changes.fire(GameProperty.DIE1, old_die1, self._die1)
        self._changes.fire(GameProperty.DIE2, old_die2, self._die2)

        outcome = classify_roll(roll.total, self._point)
        self._last_outcome = outcome
        logger.debug("Rolled %s with point %d: %s", roll, self._point, outcome.value)

        if outcome is RoundOutcome.POINT_ESTABLISHED:
            self._point = roll.total
            self._changes.fire(GameProperty.POINT, old_point, self._point)
        elif outcome.ends_round:
            self._end_round(outcome.player_won)

        return outcome

    def _end_round(self, player_won: bool) -> None:
        """Settle the bet, bump the winner's tally and close the round."""
        old_player_wins = self._player_wins
        old_house_wins = self._house_wins

        self._game_active = False
        self._game_won = player_won
        self._point = NO_POINT

        if player_won:
            self._player_wins += 1
            self.credit_win()
            self._changes.fire(GameProperty.PLAYER_WINS, old_player_wins, self._player_wins)
        else:
            self._house_wins += 1
            self.reset_bet()
            self._changes.fire(GameProperty.HOUSE_WINS, old_house_wins, self._house_wins)

        logger.info(
            "Round over: %s wins (player %d, house %d, bankroll %d)",
            "player" if player_won else "house",
            self._player_wins,
            self._house_wins,
            self._bankroll,
        )

        self._changes.fire(GameProperty.GAME_ACTIVE, True, False)
        self._changes.fire(GameProperty.GAME_WON, not player_won, player_won)
