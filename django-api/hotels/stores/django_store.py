"""Django ORM implementations of the hotel stores."""

from hotels import models
from hotels.domain import (
    Address,
    Enrollment,
    EnrollmentId,
    Hotel,
    HotelId,
    Money,
    Ticket,
    TicketId,
    TicketStatus,
    TicketType,
    TicketTypeId,
    TicketWithType,
    UserId,
)
from hotels.stores.interfaces import EnrollmentStore, HotelStore, TicketStore


def _to_address(row: models.Address) -> Address:
    return Address(
        street=row.street,
        number=row.number,
        city=row.city,
        state=row.state,
        postal_code=row.postal_code,
        neighborhood=row.neighborhood,
        complement=row.complement,
    )


def _to_hotel(row: models.Hotel) -> Hotel:
    return Hotel(
        id=HotelId(row.id),
        name=row.name,
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEnrollmentStore(EnrollmentStore):
    """Enrollment store backed by the Django ORM."""

    def find_by_user(self, user_id: UserId) -> Enrollment | None:
        row = (
            models.Enrollment.objects.select_related("address")
            .filter(user_id=user_id.value)
            .first()
        )
        if row is None:
            return None
        try:
            address = _to_address(row.address)
        except models.Address.DoesNotExist:
            address = None
        return Enrollment(
            id=EnrollmentId(row.id),
            user_id=UserId(row.user_id),
            name=row.name,
            address=address,
        )


class DjangoTicketStore(TicketStore):
    """Ticket store backed by the Django ORM."""

    def find_by_enrollment(self, enrollment_id: EnrollmentId) -> TicketWithType | None:
        row = (
            models.Ticket.objects.select_related("ticket_type")
            .filter(enrollment_id=enrollment_id.value)
            .first()
        )
        if row is None:
            return None
        ticket_type = row.ticket_type
        return TicketWithType(
            ticket=Ticket(
                id=TicketId(row.id),
                enrollment_id=EnrollmentId(row.enrollment_id),
                ticket_type_id=TicketTypeId(row.ticket_type_id),
                status=TicketStatus(row.status),
            ),
            ticket_type=TicketType(
                id=TicketTypeId(ticket_type.id),
                name=ticket_type.name,
                price=Money(ticket_type.price),
                is_remote=ticket_type.is_remote,
                includes_hotel=ticket_type.includes_hotel,
            ),
        )


class DjangoHotelStore(HotelStore):
    """Hotel store backed by the Django ORM."""

    def list_hotels(self) -> list[Hotel]:
        return [_to_hotel(row) for row in models.Hotel.objects.order_by("id")]

    def get_hotel(self, hotel_id: HotelId) -> Hotel | None:
        row = models.Hotel.objects.filter(id=hotel_id.value).first()
        if row is None:
            return None
        return _to_hotel(row)
