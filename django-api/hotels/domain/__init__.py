from hotels.domain.models import (
    Address,
    Enrollment,
    Hotel,
    Ticket,
    TicketStatus,
    TicketType,
    TicketWithType,
)
from hotels.domain.value_objects import (
    EnrollmentId,
    HotelId,
    Money,
    TicketId,
    TicketTypeId,
    UserId,
)

__all__ = [
    "Address",
    "Enrollment",
    "Hotel",
    "Ticket",
    "TicketStatus",
    "TicketType",
    "TicketWithType",
    "EnrollmentId",
    "HotelId",
    "Money",
    "TicketId",
    "TicketTypeId",
    "UserId",
]
