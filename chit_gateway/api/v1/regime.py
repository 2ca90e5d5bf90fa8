"""GET /v1/regime - Classify a pair of payment rates"""

from decimal import Decimal
from fastapi import APIRouter, Query

from chit_gateway.api.v1.schemas import AdvisorySchema, RegimeResponse
from chit_gateway.domain.regime import classify_regime, get_advisory

router = APIRouter()


@router.get("/regime", response_model=RegimeResponse)
def get_regime(
    base_payment: Decimal = Query(..., gt=0, description="Monthly payment before taking"),
    post_take_payment: Decimal = Query(..., gt=0, description="Monthly payment after taking"),
):
    """
    Return the fairness regime and its advisory.

    Lets the form show the warning as soon as both rates are entered,
    before the member count is known.
    """
    regime = classify_regime(base_payment, post_take_payment)
    return RegimeResponse(regime=regime, advisory=AdvisorySchema.from_domain(get_advisory(regime)))
