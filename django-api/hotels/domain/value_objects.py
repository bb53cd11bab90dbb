"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self


def _parse_positive_int(value: str) -> int:
    parsed = int(value)
    if parsed <= 0:
        raise ValueError(f"Identifier must be positive, got {parsed}")
    return parsed


@dataclass(frozen=True)
class _IntegerId:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Identifier must be an int")
        if self.value <= 0:
            raise ValueError("Identifier must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=_parse_positive_int(value))

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class UserId(_IntegerId):
    """Identifier of an authenticated user."""


@dataclass(frozen=True)
class EnrollmentId(_IntegerId):
    """Unique identifier for an Enrollment."""


@dataclass(frozen=True)
class TicketId(_IntegerId):
    """Unique identifier for a Ticket."""


@dataclass(frozen=True)
class TicketTypeId(_IntegerId):
    """Unique identifier for a TicketType."""


@dataclass(frozen=True)
class HotelId(_IntegerId):
    """Unique identifier for a Hotel."""


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
