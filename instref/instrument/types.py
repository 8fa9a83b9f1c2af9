"""Instrument model types -- Product, Bond, IRSwap.

Product is a capability (id + type tag) that Bond and IRSwap satisfy
independently; there is no base class. AnyProduct = Bond | IRSwap is the
closed set of variants.

All types are @final @dataclass(frozen=True, slots=True). Construction is
total: no field is validated here, and product_type is fixed per variant
(init=False) so a mismatching tag cannot be supplied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Protocol, TypeAlias, assert_never, final, runtime_checkable

from instref.core.dates import UNSET_DATE, format_date
from instref.instrument.enums import (
    BondIdType,
    Currency,
    DayCountConvention,
    FloatingIndex,
    FloatingIndexTenor,
    PaymentFrequency,
    ProductType,
    SwapLegType,
    SwapType,
)
from instref.instrument.labels import (
    currency_label,
    day_count_label,
    floating_index_label,
    floating_index_tenor_label,
    payment_frequency_label,
    swap_leg_type_label,
    swap_type_label,
)


@runtime_checkable
class Product(Protocol):
    """Identity shared by every instrument: an opaque id and a type tag."""

    @property
    def product_id(self) -> str: ...

    @property
    def product_type(self) -> ProductType: ...

    def render(self) -> str: ...


@final
@dataclass(frozen=True, slots=True)
class Bond:
    """Fixed-coupon bond: ticker, coupon, maturity and identifier scheme.

    coupon is stored as given; unit and sign are the caller's convention.
    """

    product_id: str
    bond_id_type: BondIdType
    ticker: str
    coupon: float
    maturity_date: date
    product_type: ProductType = field(default=ProductType.BOND, init=False)

    @staticmethod
    def default() -> Bond:
        """Unset bond for deferred initialisation. Fields are empty/zero."""
        return Bond(
            product_id="", bond_id_type=BondIdType.CUSIP, ticker="",
            coupon=0.0, maturity_date=UNSET_DATE,
        )

    def render(self) -> str:
        """``<ticker> <coupon> <maturity>``, e.g. ``T 4.25 2030-06-15``.

        The coupon uses %g (six significant digits, trailing zeros dropped).
        """
        return f"{self.ticker} {self.coupon:g} {format_date(self.maturity_date)}"

    def __str__(self) -> str:
        return self.render()


@final
@dataclass(frozen=True, slots=True)
class IRSwap:
    """Interest rate swap static data.

    term_years is nominal; it is not reconciled against effective_date and
    termination_date, and termination_date is not checked against
    effective_date.
    """

    product_id: str
    fixed_leg_day_count_convention: DayCountConvention
    floating_leg_day_count_convention: DayCountConvention
    fixed_leg_payment_frequency: PaymentFrequency
    floating_index: FloatingIndex
    floating_index_tenor: FloatingIndexTenor
    effective_date: date
    termination_date: date
    currency: Currency
    term_years: int
    swap_type: SwapType
    swap_leg_type: SwapLegType
    product_type: ProductType = field(default=ProductType.IRSWAP, init=False)

    @staticmethod
    def default() -> IRSwap:
        """Unset swap for deferred initialisation: first enumerators, zero term."""
        return IRSwap(
            product_id="",
            fixed_leg_day_count_convention=DayCountConvention.THIRTY_THREE_SIXTY,
            floating_leg_day_count_convention=DayCountConvention.THIRTY_THREE_SIXTY,
            fixed_leg_payment_frequency=PaymentFrequency.QUARTERLY,
            floating_index=FloatingIndex.LIBOR,
            floating_index_tenor=FloatingIndexTenor.TENOR_1M,
            effective_date=UNSET_DATE,
            termination_date=UNSET_DATE,
            currency=Currency.USD,
            term_years=0,
            swap_type=SwapType.STANDARD,
            swap_leg_type=SwapLegType.OUTRIGHT,
        )

    def render(self) -> str:
        """Single-line diagnostic form, fields in fixed order.

        fixedDayCount:30/360 floatingDayCount:Act/360 paymentFreq:Quarterly
        3mLIBOR effective:2024-01-01 termination:2034-01-01 USD 10yrs
        Standard Outright
        """
        return (
            f"fixedDayCount:{day_count_label(self.fixed_leg_day_count_convention)}"
            f" floatingDayCount:{day_count_label(self.floating_leg_day_count_convention)}"
            f" paymentFreq:{payment_frequency_label(self.fixed_leg_payment_frequency)}"
            f" {floating_index_tenor_label(self.floating_index_tenor)}"
            f"{floating_index_label(self.floating_index)}"
            f" effective:{format_date(self.effective_date)}"
            f" termination:{format_date(self.termination_date)}"
            f" {currency_label(self.currency)}"
            f" {self.term_years}yrs"
            f" {swap_type_label(self.swap_type)}"
            f" {swap_leg_type_label(self.swap_leg_type)}"
        )

    def __str__(self) -> str:
        return self.render()


AnyProduct: TypeAlias = Bond | IRSwap


def render(product: AnyProduct) -> str:
    """Render any product variant."""
    match product:
        case Bond():
            return product.render()
        case IRSwap():
            return product.render()
        case _never:
            assert_never(_never)
