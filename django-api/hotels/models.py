"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.conf import settings
from django.db import models


class Enrollment(models.Model):
    """Persistence model for a user's event enrollment."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="enrollment"
    )
    name = models.CharField(max_length=255)
    cpf = models.CharField(max_length=14)
    birthday = models.DateField()
    phone = models.CharField(max_length=32)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.name


class Address(models.Model):
    """Persistence model for an enrollment's address."""

    enrollment = models.OneToOneField(
        Enrollment, on_delete=models.CASCADE, related_name="address"
    )
    postal_code = models.CharField(max_length=16)
    street = models.CharField(max_length=255)
    city = models.CharField(max_length=255)
    state = models.CharField(max_length=2)
    number = models.CharField(max_length=16)
    neighborhood = models.CharField(max_length=255)
    complement = models.CharField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.street}, {self.number} - {self.city}/{self.state}"


class TicketType(models.Model):
    """Persistence model for ticket types."""

    name = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    is_remote = models.BooleanField()
    includes_hotel = models.BooleanField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"


class Ticket(models.Model):
    """Persistence model for an enrollment's ticket."""

    class Status(models.TextChoices):
        RESERVED = "RESERVED"
        PAID = "PAID"

    ticket_type = models.ForeignKey(
        TicketType, on_delete=models.PROTECT, related_name="tickets"
    )
    enrollment = models.OneToOneField(
        Enrollment, on_delete=models.CASCADE, related_name="ticket"
    )
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.RESERVED
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.enrollment} - {self.ticket_type.name} ({self.status})"


class Hotel(models.Model):
    """Persistence model for hotels."""

    name = models.CharField(max_length=255)
    image = models.URLField(max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name
