"""Closed-form chit payment formulas for a single month"""

from decimal import Decimal
from typing import Tuple

from chit_gateway.domain.currency import Amount, to_decimal
from chit_gateway.domain.exceptions import InvalidChitParametersError, MonthOutOfRangeError

MIN_MEMBERS = 2


def validate_parameters(
    members_count: int,
    base_payment: Amount,
    post_take_payment: Amount,
) -> Tuple[int, Decimal, Decimal]:
    """
    Check chit preconditions and return (n, B, A) with rates as Decimal.

    Every formula and schedule entry point goes through this check.
    """
    if isinstance(members_count, bool) or not isinstance(members_count, int):
        raise InvalidChitParametersError(
            f"members_count must be an integer, got {members_count!r}"
        )
    if members_count < MIN_MEMBERS:
        raise InvalidChitParametersError(
            f"At least {MIN_MEMBERS} members required, got {members_count}"
        )

    base = to_decimal(base_payment)
    post_take = to_decimal(post_take_payment)

    if base <= 0:
        raise InvalidChitParametersError(f"Base payment must be positive, got {base}")
    if post_take <= 0:
        raise InvalidChitParametersError(f"Post-take payment must be positive, got {post_take}")

    return members_count, base, post_take


def _validate_month(month: int, members_count: int) -> None:
    if isinstance(month, bool) or not isinstance(month, int):
        raise MonthOutOfRangeError(f"Month must be an integer, got {month!r}")
    if not 1 <= month <= members_count:
        raise MonthOutOfRangeError(f"Month {month} outside 1..{members_count}")


def amount_received(
    month: int,
    members_count: int,
    base_payment: Amount,
    post_take_payment: Amount,
) -> Decimal:
    """
    Payout for the member taking the chit in `month`.

    Formula: (n - 1) * B + (m - 1) * (A - B)

    Every other member contributes B; the m - 1 members who already took
    the chit contribute A instead, shifting the pool by (A - B) each.
    """
    n, base, post_take = validate_parameters(members_count, base_payment, post_take_payment)
    _validate_month(month, n)

    return (n - 1) * base + (month - 1) * (post_take - base)


def total_paid(
    taking_month: int,
    members_count: int,
    base_payment: Amount,
    post_take_payment: Amount,
) -> Decimal:
    """
    Total a member pays over the cycle when taking in `taking_month`.

    Formula: (p - 1) * B + (n - p) * A
    """
    n, base, post_take = validate_parameters(members_count, base_payment, post_take_payment)
    _validate_month(taking_month, n)

    return (taking_month - 1) * base + (n - taking_month) * post_take


def net_profit_loss(amount_received: Amount, total_paid: Amount) -> Decimal:
    """Net = amount received - total paid"""
    return to_decimal(amount_received) - to_decimal(total_paid)
