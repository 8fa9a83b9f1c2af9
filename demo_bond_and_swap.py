"""
demo_bond_and_swap.py -- A walkthrough of instref's instrument model.

Builds a US Treasury bond and a 10y USD swap, prints their diagnostic
renderings, and shows the two behaviours worth knowing about:

  1. Construction never validates. A swap whose termination precedes its
     effective date is a perfectly good IRSwap value; catching that is the
     job of whatever builds instruments from reference data.
  2. Label functions are total. A value outside an enum renders as "" and
     logs a warning instead of raising.

Run this:  .venv/bin/python demo_bond_and_swap.py
"""

from __future__ import annotations

import dataclasses
import logging

from instref.core.dates import from_ymd
from instref.core.result import Err, Ok
from instref.infra.config import LoggingConfig, configure_logging
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
from instref.instrument.labels import parse_label, swap_type_label
from instref.instrument.types import AnyProduct, Bond, IRSwap, render

log = logging.getLogger("demo_bond_and_swap")


def sep(title: str) -> None:
    """Print a section separator."""
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}\n")


configure_logging(LoggingConfig(level="INFO"))

# ============================================================================
#  STEP 1: A BOND
# ============================================================================

sep("STEP 1: A fixed-coupon bond")

# product_type is not a constructor argument: a Bond is always BOND.
treasury = Bond(
    product_id="91282CJL6",
    bond_id_type=BondIdType.CUSIP,
    ticker="T",
    coupon=4.25,
    maturity_date=from_ymd(2030, 6, 15),
)
print(f"  {treasury.product_id} ({treasury.product_type.value}, {treasury.bond_id_type.value})")
print(f"  render: {treasury}")

# ============================================================================
#  STEP 2: A SWAP
# ============================================================================

sep("STEP 2: An interest rate swap")

swap = IRSwap(
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
print(f"  {swap.product_id} ({swap.product_type.value})")
print(f"  render: {swap}")

# ============================================================================
#  STEP 3: ONE CODE PATH FOR BOTH
# ============================================================================

sep("STEP 3: Working with AnyProduct")

book: tuple[AnyProduct, ...] = (treasury, swap)
for product in book:
    print(f"  {product.product_type.value:7s} {render(product)}")

# ============================================================================
#  STEP 4: WHAT THE MODEL DOES NOT CHECK
# ============================================================================

sep("STEP 4: No validation, total rendering")

backwards = dataclasses.replace(
    swap, effective_date=swap.termination_date, termination_date=swap.effective_date,
)
print(f"  backwards swap: {backwards}")

# Out-of-domain value: empty label plus a warning on instref.instrument.labels.
print(f"  swap_type_label('SWAPTION') -> {swap_type_label('SWAPTION')!r}")  # type: ignore[arg-type]

match parse_label(SwapType, "IMM"):
    case Ok(member):
        print(f"  parse_label(SwapType, 'IMM') -> {member}")
    case Err(e):
        log.error("unexpected: %s", e.message)

match parse_label(SwapType, "Swaption"):
    case Ok(member):
        log.error("unexpected: %s", member)
    case Err(e):
        print(f"  parse_label(SwapType, 'Swaption') -> {e.code}: {e.message}")
        log.info("rejected label: %s", e.to_dict())

print("\nDone.")
