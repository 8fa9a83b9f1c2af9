"""Hypothesis profiles and pytest fixtures for instref."""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from instref.core.dates import from_ymd
from instref.instrument.enums import (
    BondIdType,
    Currency,
    DayCountConvention,
    FloatingIndex,
    FloatingIndexTenor,
    PaymentFrequency,
    SwapLegType,
    SwapType,
)
from instref.instrument.types import Bond, IRSwap

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# FIXTURES
# ===================================================================


@pytest.fixture
def treasury() -> Bond:
    return Bond(
        product_id="91282CJL6",
        bond_id_type=BondIdType.CUSIP,
        ticker="T",
        coupon=4.25,
        maturity_date=from_ymd(2030, 6, 15),
    )


@pytest.fixture
def usd_10y_swap() -> IRSwap:
    return IRSwap(
        product_id="SWAP-USD-10Y",
        fixed_leg_day_count_convention=DayCountConvention.THIRTY_THREE_SIXTY,
        floating_leg_day_count_convention=DayCountConvention.ACT_THREE_SIXTY,
        fixed_leg_payment_frequency=PaymentFrequency.QUARTERLY,
        floating_index=FloatingIndex.LIBOR,
        floating_index_tenor=FloatingIndexTenor.TENOR_3M,
        effective_date=from_ymd(2024, 1, 1),
        termination_date=from_ymd(2034, 1, 1),
        currency=Currency.USD,
        term_years=10,
        swap_type=SwapType.STANDARD,
        swap_leg_type=SwapLegType.OUTRIGHT,
    )
