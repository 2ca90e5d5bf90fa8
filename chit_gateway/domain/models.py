"""Domain models - pure Python dataclasses representing chit fund values"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class ChitRegime(str, Enum):
    """Fairness regime of a chit, decided by post-take vs base payment"""

    EARLY_TAKERS_BENEFIT = "early-takers-benefit"  # A < B
    ROSCA_MODE = "rosca-mode"  # A == B
    STANDARD_CHIT = "standard-chit"  # A > B

    @property
    def advisory(self) -> "Advisory":
        from chit_gateway.domain.regime import get_advisory

        return get_advisory(self)


class Severity(str, Enum):
    """How loudly the presentation layer should flag an advisory"""

    DESTRUCTIVE = "destructive"
    WARNING = "warning"
    INFORMATIONAL = "informational"


@dataclass(frozen=True)
class Advisory:
    """Fixed warning message shown for a regime"""

    title: str
    description: str
    severity: Severity


@dataclass(frozen=True)
class ChitParameters:
    """Static inputs of a chit; the only thing ever persisted"""

    members_count: int
    base_payment: Decimal
    post_take_payment: Decimal


@dataclass(frozen=True)
class ScheduleRow:
    """Outcome for the member taking the chit in a given month"""

    month: int
    amount_received: Decimal
    total_paid: Decimal
    net_profit_loss: Decimal
    monthly_payment_before_take: Decimal
    monthly_payment_after_take: Decimal


@dataclass(frozen=True)
class DatedScheduleRow:
    """Schedule row pinned to a calendar due date"""

    row: ScheduleRow
    due_date: date
