"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from chit_gateway.domain.models import Advisory, ChitRegime, DatedScheduleRow, ScheduleRow, Severity
from chit_gateway.domain.currency import format_currency, format_signed_currency

# Same precision as the Numeric(14, 2) chit columns
MONEY_MAX_DIGITS = 14
MONEY_DECIMAL_PLACES = 2

MAX_MEMBERS = 1000


def _money(default, description: str):
    return Field(
        default,
        gt=0,
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        description=description,
    )


class ChitParametersRequest(BaseModel):
    """Request body for POST /v1/schedule/preview"""

    members_count: int = Field(..., ge=2, le=MAX_MEMBERS, description="Number of members (one month per member)")
    base_payment: Decimal = _money(..., "Monthly payment before taking the chit")
    post_take_payment: Decimal = _money(..., "Monthly payment after taking the chit")
    chit_amount: Optional[Decimal] = _money(None, "Pool size, used to suggest a base payment")
    start_date: Optional[date] = Field(None, description="Due date of month 1")


class ChitCreateRequest(BaseModel):
    """Request body for POST /v1/chits"""

    name: str = Field(..., min_length=2, max_length=100, description="Chit group name")
    chit_amount: Decimal = _money(..., "Pool size")
    members_count: int = Field(..., ge=2, le=MAX_MEMBERS, description="Number of members")
    base_payment: Decimal = _money(..., "Monthly payment before taking the chit")
    post_take_payment: Decimal = _money(..., "Monthly payment after taking the chit")
    start_date: Optional[date] = None


class AdvisorySchema(BaseModel):
    """Warning shown for a chit's regime"""

    title: str
    description: str
    severity: Severity

    @classmethod
    def from_domain(cls, advisory: Advisory) -> "AdvisorySchema":
        return cls(title=advisory.title, description=advisory.description, severity=advisory.severity)


class RegimeResponse(BaseModel):
    """Response for GET /v1/regime"""

    regime: ChitRegime
    advisory: AdvisorySchema


class ScheduleRowSchema(BaseModel):
    """Single month of a chit schedule, with display strings"""

    month: int
    due_date: Optional[date] = None
    amount_received: Decimal
    total_paid: Decimal
    net_profit_loss: Decimal
    monthly_payment_before_take: Decimal
    monthly_payment_after_take: Decimal
    amount_received_display: str
    total_paid_display: str
    net_profit_loss_display: str

    @classmethod
    def from_domain(
        cls,
        row: ScheduleRow,
        locale: str,
        due_date: Optional[date] = None,
    ) -> "ScheduleRowSchema":
        return cls(
            month=row.month,
            due_date=due_date,
            amount_received=row.amount_received,
            total_paid=row.total_paid,
            net_profit_loss=row.net_profit_loss,
            monthly_payment_before_take=row.monthly_payment_before_take,
            monthly_payment_after_take=row.monthly_payment_after_take,
            amount_received_display=format_currency(row.amount_received, locale),
            total_paid_display=format_currency(row.total_paid, locale),
            net_profit_loss_display=format_signed_currency(row.net_profit_loss, locale),
        )

    @classmethod
    def from_dated(cls, dated: DatedScheduleRow, locale: str) -> "ScheduleRowSchema":
        return cls.from_domain(dated.row, locale, due_date=dated.due_date)


class PreviewResponse(BaseModel):
    """Response for POST /v1/schedule/preview"""

    members_count: int
    regime: ChitRegime
    advisory: AdvisorySchema
    suggested_base_payment: Optional[Decimal] = None
    schedule: List[ScheduleRowSchema]


class ChitResponse(BaseModel):
    """Response for POST /v1/chits and GET /v1/chits/{chit_id}"""

    chit_id: str
    name: str
    chit_amount: Decimal
    members_count: int
    months: int
    base_payment: Decimal
    post_take_payment: Decimal
    start_date: Optional[date] = None
    status: str
    regime: ChitRegime
    advisory: AdvisorySchema
    created_at: str


class ScheduleResponse(BaseModel):
    """Response for GET /v1/chits/{chit_id}/schedule"""

    chit_id: str
    regime: ChitRegime
    schedule: List[ScheduleRowSchema]
