"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in hotels/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from hotels.domain.value_objects import (
    EnrollmentId,
    HotelId,
    Money,
    TicketId,
    TicketTypeId,
    UserId,
)


class TicketStatus(Enum):
    """Lifecycle state of a ticket. Only PAID grants anything."""

    RESERVED = "RESERVED"
    PAID = "PAID"


@dataclass(frozen=True)
class Address:
    """Domain representation of an enrollment's Address."""

    street: str
    number: str
    city: str
    state: str
    postal_code: str
    neighborhood: str = ""
    complement: str = ""


@dataclass(frozen=True)
class Enrollment:
    """Domain representation of an Enrollment."""

    id: EnrollmentId
    user_id: UserId
    name: str
    address: Address | None = None


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: TicketTypeId
    name: str
    price: Money
    is_remote: bool
    includes_hotel: bool


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket."""

    id: TicketId
    enrollment_id: EnrollmentId
    ticket_type_id: TicketTypeId
    status: TicketStatus

    @property
    def is_paid(self) -> bool:
        return self.status is TicketStatus.PAID


@dataclass(frozen=True)
class TicketWithType:
    """A ticket together with the ticket type it references.

    Built by the ticket store, which loads both in a single lookup.
    """

    ticket: Ticket
    ticket_type: TicketType

    def __post_init__(self) -> None:
        if self.ticket.ticket_type_id != self.ticket_type.id:
            raise ValueError("Ticket type does not belong to ticket")


@dataclass(frozen=True)
class Hotel:
    """Domain representation of a Hotel."""

    id: HotelId
    name: str
    image: str
    created_at: datetime
    updated_at: datetime
