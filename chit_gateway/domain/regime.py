"""Fairness regime classification and the advisories shown for each regime"""

from typing import Dict

from chit_gateway.domain.currency import Amount, to_decimal
from chit_gateway.domain.models import Advisory, ChitRegime, Severity

REGIME_ADVISORIES: Dict[ChitRegime, Advisory] = {
    ChitRegime.EARLY_TAKERS_BENEFIT: Advisory(
        title="Early Takers Benefit",
        description="A < B: Early takers benefit heavily; later takers lose. Continue?",
        severity=Severity.DESTRUCTIVE,
    ),
    ChitRegime.ROSCA_MODE: Advisory(
        title="ROSCA Mode",
        description="A = B: All members pay equally. No profit/loss — standard ROSCA mode.",
        severity=Severity.INFORMATIONAL,
    ),
    ChitRegime.STANDARD_CHIT: Advisory(
        title="Standard Chit",
        description="A > B: Standard chit mode. Early takers lose, late takers gain.",
        severity=Severity.WARNING,
    ),
}


def classify_regime(base_payment: Amount, post_take_payment: Amount) -> ChitRegime:
    """
    Classify who benefits from the chit.

    - A < B: early takers profit, late takers lose (destructive)
    - A = B: nobody profits or loses, classic ROSCA (informational)
    - A > B: conventional discount chit, late takers profit (warning)

    Defined for every finite pair of rates; member count is irrelevant.
    """
    base = to_decimal(base_payment)
    post_take = to_decimal(post_take_payment)

    if post_take < base:
        return ChitRegime.EARLY_TAKERS_BENEFIT
    elif post_take == base:
        return ChitRegime.ROSCA_MODE
    else:
        return ChitRegime.STANDARD_CHIT


def get_advisory(regime: ChitRegime) -> Advisory:
    """Look up the fixed advisory for a regime"""
    return REGIME_ADVISORIES[regime]
