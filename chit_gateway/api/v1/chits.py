"""Chit endpoints - persist parameters, derive schedules on demand"""

import uuid
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from chit_gateway.api.v1.schemas import (
    AdvisorySchema,
    ChitCreateRequest,
    ChitResponse,
    ScheduleResponse,
    ScheduleRowSchema,
)
from chit_gateway.api.dependencies import get_currency_locale, get_request_id
from chit_gateway.infrastructure.database.session import get_db
from chit_gateway.infrastructure.database.models import Chit
from chit_gateway.infrastructure.database.repositories import ChitRepository
from chit_gateway.domain.exceptions import InvalidChitParametersError, MonthOutOfRangeError
from chit_gateway.domain.formulas import validate_parameters
from chit_gateway.domain.models import ChitParameters
from chit_gateway.domain.regime import classify_regime, get_advisory
from chit_gateway.domain.schedule import attach_due_dates, generate_schedule_for, schedule_row
from chit_gateway.infrastructure.observability.metrics import record_chit_created, schedule_generation_histogram
from chit_gateway.infrastructure.observability.logging import log_chit_created
from chit_gateway.utils.date_utils import add_months

router = APIRouter()


def _load_chit(chit_id: str, db: Session) -> Chit:
    try:
        chit_uuid = uuid.UUID(chit_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid chit ID format")

    chit = ChitRepository(db).get_chit_by_id(chit_uuid)
    if not chit:
        raise HTTPException(status_code=404, detail="Chit not found")
    return chit


def _to_response(chit: Chit) -> ChitResponse:
    params = ChitRepository.to_parameters(chit)
    regime = classify_regime(params.base_payment, params.post_take_payment)
    return ChitResponse(
        chit_id=str(chit.id),
        name=chit.name,
        chit_amount=chit.chit_amount,
        members_count=chit.members_count,
        months=chit.months,
        base_payment=params.base_payment,
        post_take_payment=params.post_take_payment,
        start_date=chit.start_date,
        status=chit.status,
        regime=regime,
        advisory=AdvisorySchema.from_domain(get_advisory(regime)),
        created_at=chit.created_at.isoformat(),
    )


@router.post("/chits", response_model=ChitResponse, status_code=201)
def create_chit(
    request_body: ChitCreateRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Create a chit group.

    Flow:
    1. Validate parameters against the formula preconditions
    2. Persist parameters only (months = members_count)
    3. Record regime metrics and log creation
    """
    request_id = get_request_id(request)

    try:
        members_count, base, post_take = validate_parameters(
            request_body.members_count,
            request_body.base_payment,
            request_body.post_take_payment,
        )
        params = ChitParameters(members_count=members_count, base_payment=base, post_take_payment=post_take)

        db_chit = ChitRepository(db).create_chit(
            name=request_body.name,
            chit_amount=request_body.chit_amount,
            params=params,
            start_date=request_body.start_date,
        )
        db.commit()
        db.refresh(db_chit)

    except InvalidChitParametersError as e:
        db.rollback()
        logging.warning(f"Invalid chit parameters: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    response = _to_response(db_chit)
    record_chit_created(response.regime.value, members_count)
    log_chit_created(request_id, response.chit_id, response.regime.value, members_count)

    return response


@router.get("/chits/{chit_id}", response_model=ChitResponse)
def get_chit(chit_id: str, db: Session = Depends(get_db)):
    """Retrieve stored chit parameters with the derived regime advisory"""
    return _to_response(_load_chit(chit_id, db))


@router.get("/chits/{chit_id}/schedule", response_model=ScheduleResponse)
def get_chit_schedule(
    chit_id: str,
    db: Session = Depends(get_db),
    locale: str = Depends(get_currency_locale),
):
    """
    Recompute the payment schedule from stored parameters.

    Returns:
        One row per month, with due dates when the chit has a start date
    """
    chit = _load_chit(chit_id, db)
    params = ChitRepository.to_parameters(chit)

    with schedule_generation_histogram.time():
        schedule = generate_schedule_for(params)

    if chit.start_date is not None:
        rows = [ScheduleRowSchema.from_dated(dated, locale) for dated in attach_due_dates(schedule, chit.start_date)]
    else:
        rows = [ScheduleRowSchema.from_domain(row, locale) for row in schedule]

    return ScheduleResponse(
        chit_id=str(chit.id),
        regime=classify_regime(params.base_payment, params.post_take_payment),
        schedule=rows,
    )


@router.get("/chits/{chit_id}/schedule/{month}", response_model=ScheduleRowSchema)
def get_chit_schedule_month(
    chit_id: str,
    month: int,
    db: Session = Depends(get_db),
    locale: str = Depends(get_currency_locale),
):
    """Outcome for the member taking the chit in a single month"""
    chit = _load_chit(chit_id, db)
    params = ChitRepository.to_parameters(chit)

    try:
        row = schedule_row(month, params)
    except MonthOutOfRangeError as e:
        raise HTTPException(status_code=404, detail=str(e))

    due_date = add_months(chit.start_date, month - 1) if chit.start_date is not None else None

    return ScheduleRowSchema.from_domain(row, locale, due_date=due_date)
