"""Display labels for the categorical attributes of an IRSwap.

One named function per enum, each a total mapping: every member has exactly
one label, and any value outside the enum renders as "" (logged at WARNING)
instead of raising.

parse_label() is the inverse lookup, returning Ok | Err.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, TypeVar

from instref.core.errors import UnknownLabelError
from instref.core.result import Err, Ok
from instref.core.types import UtcDatetime
from instref.instrument.enums import (
    Currency,
    DayCountConvention,
    FloatingIndex,
    FloatingIndexTenor,
    PaymentFrequency,
    SwapLegType,
    SwapType,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_DAY_COUNT_LABELS: dict[DayCountConvention, str] = {
    DayCountConvention.THIRTY_THREE_SIXTY: "30/360",
    DayCountConvention.ACT_THREE_SIXTY: "Act/360",
}

_PAYMENT_FREQUENCY_LABELS: dict[PaymentFrequency, str] = {
    PaymentFrequency.QUARTERLY: "Quarterly",
    PaymentFrequency.SEMI_ANNUAL: "Semi-Annual",
    PaymentFrequency.ANNUAL: "Annual",
}

_FLOATING_INDEX_LABELS: dict[FloatingIndex, str] = {
    FloatingIndex.LIBOR: "LIBOR",
    FloatingIndex.EURIBOR: "EURIBOR",
}

_FLOATING_INDEX_TENOR_LABELS: dict[FloatingIndexTenor, str] = {
    FloatingIndexTenor.TENOR_1M: "1m",
    FloatingIndexTenor.TENOR_3M: "3m",
    FloatingIndexTenor.TENOR_6M: "6m",
    FloatingIndexTenor.TENOR_12M: "12m",
}

_CURRENCY_LABELS: dict[Currency, str] = {
    Currency.USD: "USD",
    Currency.EUR: "EUR",
    Currency.GBP: "GBP",
}

_SWAP_TYPE_LABELS: dict[SwapType, str] = {
    SwapType.STANDARD: "Standard",
    SwapType.FORWARD: "Forward",
    SwapType.IMM: "IMM",
    SwapType.MAC: "MAC",
    SwapType.BASIS: "Basis",
}

_SWAP_LEG_TYPE_LABELS: dict[SwapLegType, str] = {
    SwapLegType.OUTRIGHT: "Outright",
    SwapLegType.CURVE: "Curve",
    SwapLegType.FLY: "Fly",
}

_TABLES: dict[type[Enum], dict[Any, str]] = {
    DayCountConvention: _DAY_COUNT_LABELS,
    PaymentFrequency: _PAYMENT_FREQUENCY_LABELS,
    FloatingIndex: _FLOATING_INDEX_LABELS,
    FloatingIndexTenor: _FLOATING_INDEX_TENOR_LABELS,
    Currency: _CURRENCY_LABELS,
    SwapType: _SWAP_TYPE_LABELS,
    SwapLegType: _SWAP_LEG_TYPE_LABELS,
}


def _label(enum_cls: type[Enum], value: object) -> str:
    # isinstance alone is not enough: objects can claim enum_cls as __class__
    # (e.g. Mock(spec=enum_cls)) without being a member, or being hashable
    if isinstance(value, enum_cls):
        try:
            label = _TABLES[enum_cls].get(value)
        except TypeError:
            label = None
        if label is not None:
            return label
    logger.warning("No %s label for %r; rendering as empty", enum_cls.__name__, value)
    return ""


def day_count_label(value: DayCountConvention) -> str:
    return _label(DayCountConvention, value)


def payment_frequency_label(value: PaymentFrequency) -> str:
    return _label(PaymentFrequency, value)


def floating_index_label(value: FloatingIndex) -> str:
    return _label(FloatingIndex, value)


def floating_index_tenor_label(value: FloatingIndexTenor) -> str:
    return _label(FloatingIndexTenor, value)


def currency_label(value: Currency) -> str:
    return _label(Currency, value)


def swap_type_label(value: SwapType) -> str:
    return _label(SwapType, value)


def swap_leg_type_label(value: SwapLegType) -> str:
    return _label(SwapLegType, value)


def label_table(enum_cls: type[E]) -> dict[E, str]:
    """Copy of the member -> label table for enum_cls (empty if unlabelled)."""
    return dict(_TABLES.get(enum_cls, {}))  # type: ignore[arg-type]


def parse_label(enum_cls: type[E], label: str) -> Ok[E] | Err[UnknownLabelError]:
    """Find the member of enum_cls whose display label is exactly ``label``.

    Case-sensitive. Returns Err for an unknown label, and for an enum that
    has no label table at all.
    """
    for member, text in _TABLES.get(enum_cls, {}).items():
        if text == label:
            return Ok(member)  # type: ignore[arg-type]
    return Err(UnknownLabelError(
        message=f"'{label}' is not a {enum_cls.__name__} label",
        code="UNKNOWN_LABEL",
        timestamp=UtcDatetime.now(),
        source="labels.parse_label",
        enum_name=enum_cls.__name__,
        label=label,
    ))
