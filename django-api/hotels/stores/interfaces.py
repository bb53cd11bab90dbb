"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from hotels.domain import Enrollment, EnrollmentId, Hotel, HotelId, TicketWithType, UserId


class EnrollmentStore(ABC):
    """Interface for enrollment lookups."""

    @abstractmethod
    def find_by_user(self, user_id: UserId) -> Enrollment | None:
        """Return the user's enrollment with its address, or None if not found."""
        ...


class TicketStore(ABC):
    """Interface for ticket lookups."""

    @abstractmethod
    def find_by_enrollment(self, enrollment_id: EnrollmentId) -> TicketWithType | None:
        """Return the enrollment's ticket joined with its type, or None if not found."""
        ...


class HotelStore(ABC):
    """Interface for hotel catalog lookups."""

    @abstractmethod
    def list_hotels(self) -> list[Hotel]:
        """Return all hotels ordered by id ascending."""
        ...

    @abstractmethod
    def get_hotel(self, hotel_id: HotelId) -> Hotel | None:
        """Return a hotel by ID, or None if not found."""
        ...
