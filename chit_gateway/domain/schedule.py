"""Chit schedule generation across every month of the cycle"""

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import List

from chit_gateway.domain.currency import Amount, to_decimal
from chit_gateway.domain.exceptions import InvalidChitParametersError
from chit_gateway.domain.formulas import (
    amount_received,
    net_profit_loss,
    total_paid,
    validate_parameters,
)
from chit_gateway.domain.models import ChitParameters, DatedScheduleRow, ScheduleRow
from chit_gateway.utils.date_utils import generate_monthly_dates

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def schedule_row(month: int, params: ChitParameters) -> ScheduleRow:
    """
    Outcome for the member taking the chit in `month`.

    Raises:
        MonthOutOfRangeError: month outside 1..members_count
    """
    n, base, post_take = params.members_count, params.base_payment, params.post_take_payment
    received = amount_received(month, n, base, post_take)
    paid = total_paid(month, n, base, post_take)

    return ScheduleRow(
        month=month,
        amount_received=received,
        total_paid=paid,
        net_profit_loss=net_profit_loss(received, paid),
        monthly_payment_before_take=to_decimal(base),
        monthly_payment_after_take=to_decimal(post_take),
    )


def generate_schedule(
    members_count: int,
    base_payment: Amount,
    post_take_payment: Amount,
) -> List[ScheduleRow]:
    """
    Build the full chit schedule, one row per month.

    Requirements:
    - Months run 1..members_count in ascending order, so rows[i].month == i + 1
    - net_profit_loss == amount_received - total_paid on every row
    - Nothing is cached; same inputs always give an equal list

    Raises:
        InvalidChitParametersError: members_count < 2 or a non-positive rate

    Example:
        n=5, B=1000, A=1500
        month 1 -> received 4000, paid 6000, net -2000
        month 5 -> received 6000, paid 4000, net +2000
    """
    n, base, post_take = validate_parameters(members_count, base_payment, post_take_payment)
    params = ChitParameters(members_count=n, base_payment=base, post_take_payment=post_take)

    schedule = [schedule_row(month, params) for month in range(1, n + 1)]

    logger.debug("Generated %d-month schedule", n)
    return schedule


def generate_schedule_for(params: ChitParameters) -> List[ScheduleRow]:
    """Generate the schedule from a ChitParameters value"""
    return generate_schedule(params.members_count, params.base_payment, params.post_take_payment)


def attach_due_dates(schedule: List[ScheduleRow], start_date: date) -> List[DatedScheduleRow]:
    """Pair each row with its due date: month m falls m - 1 months after start"""
    due_dates = generate_monthly_dates(start_date, len(schedule))
    return [DatedScheduleRow(row=row, due_date=due) for row, due in zip(schedule, due_dates)]


def suggested_base_payment(chit_amount: Amount, members_count: int) -> Decimal:
    """
    Base payment that collects the full chit amount in one month.

    chit_amount / members_count, rounded half-up to paise.
    """
    amount = to_decimal(chit_amount)
    if amount <= 0:
        raise InvalidChitParametersError(f"Chit amount must be positive, got {amount}")

    # Member count goes through the same checks as the formulas
    n, _, _ = validate_parameters(members_count, amount, amount)

    return (amount / n).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
