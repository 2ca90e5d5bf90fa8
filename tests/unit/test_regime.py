"""Unit tests for regime classification and advisories"""

import pytest
from decimal import Decimal
from chit_gateway.domain.models import ChitRegime, Severity
from chit_gateway.domain.regime import REGIME_ADVISORIES, classify_regime, get_advisory
from chit_gateway.domain.exceptions import InvalidChitParametersError


def test_post_take_lower_is_early_takers_benefit():
    """A < B"""
    assert classify_regime(1500, 1000) is ChitRegime.EARLY_TAKERS_BENEFIT


def test_equal_rates_is_rosca_mode():
    """A = B, regardless of representation"""
    assert classify_regime(1000, 1000) is ChitRegime.ROSCA_MODE
    assert classify_regime("1000.00", Decimal("1000")) is ChitRegime.ROSCA_MODE


def test_post_take_higher_is_standard_chit():
    """A > B"""
    assert classify_regime(1000, 1500) is ChitRegime.STANDARD_CHIT


def test_one_paisa_difference_is_enough():
    """Classification uses exact comparison"""
    assert classify_regime("1000.00", "1000.01") is ChitRegime.STANDARD_CHIT
    assert classify_regime("1000.01", "1000.00") is ChitRegime.EARLY_TAKERS_BENEFIT


@pytest.mark.parametrize(
    "base, post_take",
    [(1, 2), (2, 1), (5, 5), (0, 0), (-10, 3), (3, -10), ("0.1", 0.1)],
)
def test_classification_is_exhaustive_and_exclusive(base, post_take):
    """Exactly one regime matches the comparison for any finite pair"""
    regime = classify_regime(base, post_take)
    B, A = Decimal(str(base)), Decimal(str(post_take))

    matches = {
        ChitRegime.EARLY_TAKERS_BENEFIT: A < B,
        ChitRegime.ROSCA_MODE: A == B,
        ChitRegime.STANDARD_CHIT: A > B,
    }
    assert [r for r, hit in matches.items() if hit] == [regime]


def test_classify_rejects_nan():
    """NaN has no ordering"""
    with pytest.raises(InvalidChitParametersError):
        classify_regime("NaN", 1000)


def test_advisory_severities():
    """Early-takers is the loudest warning, ROSCA only informs"""
    assert get_advisory(ChitRegime.EARLY_TAKERS_BENEFIT).severity is Severity.DESTRUCTIVE
    assert get_advisory(ChitRegime.STANDARD_CHIT).severity is Severity.WARNING
    assert get_advisory(ChitRegime.ROSCA_MODE).severity is Severity.INFORMATIONAL


def test_advisory_text():
    """Titles and descriptions are fixed"""
    advisory = get_advisory(ChitRegime.EARLY_TAKERS_BENEFIT)

    assert advisory.title == "Early Takers Benefit"
    assert advisory.description.startswith("A < B")
    assert get_advisory(ChitRegime.ROSCA_MODE).title == "ROSCA Mode"
    assert get_advisory(ChitRegime.STANDARD_CHIT).title == "Standard Chit"


def test_every_regime_has_an_advisory():
    """Lookup table covers the whole enum"""
    assert set(REGIME_ADVISORIES) == set(ChitRegime)


def test_regime_advisory_property():
    """Enum convenience property matches the table"""
    assert ChitRegime.STANDARD_CHIT.advisory == get_advisory(ChitRegime.STANDARD_CHIT)


def test_regime_values_are_stable_strings():
    """Values are used on the wire and as metric labels"""
    assert [r.value for r in ChitRegime] == ["early-takers-benefit", "rosca-mode", "standard-chit"]
