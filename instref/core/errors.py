"""Error value hierarchy -- no domain function raises exceptions.

Errors are frozen dataclass values that can be pattern-matched and
logged. Base class InstrefError, @final subclasses per failure kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from instref.core.types import UtcDatetime


@dataclass(frozen=True, slots=True)
class InstrefError:
    """Base error value. NOT @final -- has subclasses."""

    message: str
    code: str
    timestamp: UtcDatetime
    source: str  # "module.function" that produced this error

    def to_dict(self) -> dict[str, object]:
        """Flatten to a dict with stable keys, for log records."""
        return {
            "message": self.message,
            "code": self.code,
            "timestamp": self.timestamp.value.isoformat(),
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class UnknownLabelError(InstrefError):
    """A display label does not belong to the requested enum."""

    enum_name: str
    label: str

    def to_dict(self) -> dict[str, object]:
        return {
            **InstrefError.to_dict(self),
            "enum_name": self.enum_name,
            "label": self.label,
        }
