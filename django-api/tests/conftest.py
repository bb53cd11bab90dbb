"""Pytest configuration and shared fixtures."""

import datetime
import typing as t
from decimal import Decimal

import pytest
from django.contrib.auth.models import User
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from hotels.models import Address, Enrollment, Hotel, Ticket, TicketType


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user(django_user_model: t.Type[User]) -> User:
    return django_user_model.objects.create_user(username="ada", email="ada@example.com", password="pass")


@pytest.fixture
def token(user: User) -> Token:
    return Token.objects.create(user=user)


@pytest.fixture
def auth_client(api_client: APIClient, token: Token) -> APIClient:
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")
    return api_client


@pytest.fixture
def enrollment(user: User) -> Enrollment:
    enrollment = Enrollment.objects.create(
        user=user,
        name="Ada Lovelace",
        cpf="123.456.789-09",
        birthday=datetime.date(1990, 12, 10),
        phone="(81) 99999-0000",
    )
    Address.objects.create(
        enrollment=enrollment,
        postal_code="50000-000",
        street="Rua das Flores",
        city="Recife",
        state="PE",
        number="42",
        neighborhood="Boa Vista",
    )
    return enrollment


@pytest.fixture
def make_ticket(enrollment: Enrollment) -> t.Callable[..., Ticket]:
    def _make(
        status: str = Ticket.Status.PAID,
        is_remote: bool = False,
        includes_hotel: bool = True,
    ) -> Ticket:
        ticket_type = TicketType.objects.create(
            name="Presencial",
            price=Decimal("250.00"),
            is_remote=is_remote,
            includes_hotel=includes_hotel,
        )
        return Ticket.objects.create(enrollment=enrollment, ticket_type=ticket_type, status=status)

    return _make


@pytest.fixture
def hotel() -> Hotel:
    return Hotel.objects.create(name="Sunset Inn", image="http://x/y.png")
