"""POST /v1/schedule/preview - Live chit schedule preview (nothing persisted)"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from chit_gateway.api.v1.schemas import AdvisorySchema, ChitParametersRequest, PreviewResponse, ScheduleRowSchema
from chit_gateway.api.dependencies import get_currency_locale, get_request_id
from chit_gateway.domain.exceptions import InvalidChitParametersError
from chit_gateway.domain.regime import classify_regime, get_advisory
from chit_gateway.domain.schedule import attach_due_dates, generate_schedule, suggested_base_payment
from chit_gateway.infrastructure.observability.metrics import record_preview, schedule_generation_histogram
from chit_gateway.infrastructure.observability.logging import log_preview

router = APIRouter()


@router.post("/schedule/preview", response_model=PreviewResponse)
def preview_schedule(
    request_body: ChitParametersRequest,
    request: Request,
    locale: str = Depends(get_currency_locale),
):
    """
    Compute the full schedule and regime advisory for draft chit parameters.

    Called on every form change while a foreman is setting up a chit, so it
    never touches the database.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        with schedule_generation_histogram.time():
            schedule = generate_schedule(
                request_body.members_count,
                request_body.base_payment,
                request_body.post_take_payment,
            )
        regime = classify_regime(request_body.base_payment, request_body.post_take_payment)

        suggestion = None
        if request_body.chit_amount is not None:
            suggestion = suggested_base_payment(request_body.chit_amount, request_body.members_count)

    except InvalidChitParametersError as e:
        logging.warning(f"Invalid chit parameters: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    if request_body.start_date is not None:
        rows = [
            ScheduleRowSchema.from_dated(dated, locale)
            for dated in attach_due_dates(schedule, request_body.start_date)
        ]
    else:
        rows = [ScheduleRowSchema.from_domain(row, locale) for row in schedule]

    duration_ms = (time.time() - start_time) * 1000
    record_preview(regime.value)
    log_preview(request_id, regime.value, request_body.members_count, duration_ms)

    return PreviewResponse(
        members_count=request_body.members_count,
        regime=regime,
        advisory=AdvisorySchema.from_domain(get_advisory(regime)),
        suggested_base_payment=suggestion,
        schedule=rows,
    )
