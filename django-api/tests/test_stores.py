"""Tests for the Django ORM stores.

Run with: pytest tests/test_stores.py -v
"""

from decimal import Decimal

import pytest

from hotels.domain import EnrollmentId, HotelId, TicketStatus, UserId
from hotels.models import Enrollment, Hotel, Ticket
from hotels.stores.django_store import (
    DjangoEnrollmentStore,
    DjangoHotelStore,
    DjangoTicketStore,
)


@pytest.mark.django_db
class TestDjangoEnrollmentStore:
    def test_find_by_user_returns_enrollment_with_address(self, enrollment: Enrollment):
        found = DjangoEnrollmentStore().find_by_user(UserId(enrollment.user_id))

        assert found is not None
        assert found.id == EnrollmentId(enrollment.id)
        assert found.address is not None
        assert found.address.city == "Recife"

    def test_find_by_user_without_address(self, enrollment: Enrollment):
        enrollment.address.delete()

        found = DjangoEnrollmentStore().find_by_user(UserId(enrollment.user_id))

        assert found is not None
        assert found.address is None

    def test_find_by_user_missing(self, user):
        assert DjangoEnrollmentStore().find_by_user(UserId(user.pk)) is None


@pytest.mark.django_db
class TestDjangoTicketStore:
    def test_find_by_enrollment_joins_ticket_type(self, enrollment: Enrollment, make_ticket):
        ticket: Ticket = make_ticket(status=Ticket.Status.RESERVED, is_remote=True, includes_hotel=False)

        found = DjangoTicketStore().find_by_enrollment(EnrollmentId(enrollment.id))

        assert found is not None
        assert found.ticket.status is TicketStatus.RESERVED
        assert found.ticket_type.is_remote is True
        assert found.ticket_type.includes_hotel is False
        assert found.ticket_type.price.amount == Decimal("250.00")
        assert found.ticket.ticket_type_id.value == ticket.ticket_type_id

    def test_find_by_enrollment_missing(self, enrollment: Enrollment):
        assert DjangoTicketStore().find_by_enrollment(EnrollmentId(enrollment.id)) is None


@pytest.mark.django_db
class TestDjangoHotelStore:
    def test_list_hotels_in_insertion_order(self):
        first = Hotel.objects.create(name="B", image="http://x/b.png")
        second = Hotel.objects.create(name="A", image="http://x/a.png")

        hotels = DjangoHotelStore().list_hotels()

        assert [hotel.id.value for hotel in hotels] == [first.id, second.id]

    def test_list_hotels_empty(self):
        assert DjangoHotelStore().list_hotels() == []

    def test_get_hotel(self, hotel: Hotel):
        found = DjangoHotelStore().get_hotel(HotelId(hotel.id))

        assert found is not None
        assert found.name == "Sunset Inn"
        assert found.created_at == hotel.created_at

    def test_get_hotel_missing(self, hotel: Hotel):
        assert DjangoHotelStore().get_hotel(HotelId(hotel.id + 1)) is None
