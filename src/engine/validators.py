"""
Craps Engine - Input Validation Utilities

Provides validation functions for engine inputs. All validators either
return the validated value or raise InvalidArgumentError with a
descriptive message.
"""

from src.engine.base import DIE_FACES


class InvalidArgumentError(ValueError):
    """Raised when an engine operation receives an argument it cannot accept."""


def validate_bet(amount: int, bankroll: int) -> int:
    """
    Validate a wager against the available bankroll.

    Args:
        amount: Amount the player wants to bet
        bankroll: Funds currently available

    Returns:
        Validated amount

    Raises:
        InvalidArgumentError: If the amount is not an integer, is negative,
            or exceeds the bankroll
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidArgumentError(
            f"Bet must be an integer, got {type(amount).__name__}."
        )

    if amount < 0:
        raise InvalidArgumentError("Your bet can not be less than zero.")

    if amount > bankroll:
        raise InvalidArgumentError(
            f"Your bet of {amount} can not be greater than your bankroll of {bankroll}."
        )

    return amount


def validate_bankroll(amount: int) -> int:
    """
    Validate a bankroll balance.

    Raises:
        InvalidArgumentError: If the amount is not a non-negative integer
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidArgumentError(
            f"Bankroll must be an integer, got {type(amount).__name__}."
        )

    if amount < 0:
        raise InvalidArgumentError(f"Bankroll cannot be negative, got {amount}.")

    return amount


def validate_die_value(value: int) -> int:
    """
    Validate a single die face.

    Raises:
        InvalidArgumentError: If the value is not an integer in 1..6
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"Die value must be an integer, got {type(value).__name__}."
        )

    if not (1 <= value <= DIE_FACES):
        raise InvalidArgumentError(
            f"Die value is {value}, must be between 1 and {DIE_FACES}."
        )

    return value
