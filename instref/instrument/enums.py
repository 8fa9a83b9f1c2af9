"""Categorical attributes of Bond and IRSwap.

Enum values are the stable member names. Display labels are a separate
concern and live in instref.instrument.labels.
"""

from __future__ import annotations

from enum import Enum


class ProductType(Enum):
    """Discriminant carried by every product."""

    IRSWAP = "IRSWAP"
    BOND = "BOND"


class BondIdType(Enum):
    """Identifier scheme of a bond ticker."""

    CUSIP = "CUSIP"
    ISIN = "ISIN"


class DayCountConvention(Enum):
    THIRTY_THREE_SIXTY = "THIRTY_THREE_SIXTY"
    ACT_THREE_SIXTY = "ACT_THREE_SIXTY"


class PaymentFrequency(Enum):
    QUARTERLY = "QUARTERLY"
    SEMI_ANNUAL = "SEMI_ANNUAL"
    ANNUAL = "ANNUAL"


class FloatingIndex(Enum):
    LIBOR = "LIBOR"
    EURIBOR = "EURIBOR"


class FloatingIndexTenor(Enum):
    TENOR_1M = "TENOR_1M"
    TENOR_3M = "TENOR_3M"
    TENOR_6M = "TENOR_6M"
    TENOR_12M = "TENOR_12M"


class Currency(Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"


class SwapType(Enum):
    """Structural variant of a swap (spot-starting, forward-starting, ...)."""

    STANDARD = "STANDARD"
    FORWARD = "FORWARD"
    IMM = "IMM"
    MAC = "MAC"
    BASIS = "BASIS"


class SwapLegType(Enum):
    """How the swap is traded: on its own, or as part of a curve/fly package."""

    OUTRIGHT = "OUTRIGHT"
    CURVE = "CURVE"
    FLY = "FLY"
