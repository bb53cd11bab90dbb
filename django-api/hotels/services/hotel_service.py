"""Hotel service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Access to the hotel catalog is gated by an ordered chain of checks:
enrollment, ticket, non-empty catalog, then entitlement. The first failing
check ends the request.
"""

import structlog

from hotels.domain import Hotel, HotelId, TicketWithType, UserId
from hotels.domain.errors import (
    EntitlementFailure,
    NotFoundCause,
    NotFoundError,
    PaymentRequiredError,
)
from hotels.stores.interfaces import EnrollmentStore, HotelStore, TicketStore

logger = structlog.get_logger(__name__)


class HotelService:
    """Service for hotel catalog operations."""

    def __init__(
        self,
        enrollments: EnrollmentStore,
        tickets: TicketStore,
        hotels: HotelStore,
    ) -> None:
        self._enrollments = enrollments
        self._tickets = tickets
        self._hotels = hotels

    def resolve_access(self, user_id: UserId) -> TicketWithType:
        """Return the user's ticket once every required record is known to exist.

        Raises:
            NotFoundError: If the user has no enrollment, the enrollment has no
                ticket, or there are no hotels at all.
        """
        enrollment = self._enrollments.find_by_user(user_id)
        if enrollment is None:
            raise self._not_found(user_id, NotFoundCause.ENROLLMENT)

        ticket = self._tickets.find_by_enrollment(enrollment.id)
        if ticket is None:
            raise self._not_found(user_id, NotFoundCause.TICKET)

        # Global check, independent of the user's ticket.
        if not self._hotels.list_hotels():
            raise self._not_found(user_id, NotFoundCause.EMPTY_CATALOG)

        return ticket

    @staticmethod
    def check_entitlement(ticket: TicketWithType) -> None:
        """Ensure the ticket is paid, in person, and includes a hotel.

        Raises:
            PaymentRequiredError: If any of the three conditions does not hold.
        """
        if not ticket.ticket.is_paid:
            reason = EntitlementFailure.TICKET_NOT_PAID
        elif ticket.ticket_type.is_remote:
            reason = EntitlementFailure.REMOTE_TICKET
        elif not ticket.ticket_type.includes_hotel:
            reason = EntitlementFailure.HOTEL_NOT_INCLUDED
        else:
            return

        logger.info(
            "hotel_access_denied",
            ticket_id=ticket.ticket.id.value,
            reason=reason.value,
        )
        raise PaymentRequiredError(reason)

    def list_hotels(self, user_id: UserId) -> list[Hotel]:
        """Return all hotels for an entitled user.

        Raises:
            NotFoundError: If a required record is missing.
            PaymentRequiredError: If the user's ticket does not include a hotel.
        """
        self._authorize(user_id)
        return self._hotels.list_hotels()

    def get_hotel(self, user_id: UserId, hotel_id: HotelId | None) -> Hotel:
        """Return a hotel by ID for an entitled user.

        A hotel_id of None stands for a path id that cannot name any hotel; it
        is reported as missing once the user is known to be entitled.

        Raises:
            NotFoundError: If a required record is missing or the hotel does
                not exist.
            PaymentRequiredError: If the user's ticket does not include a hotel.
        """
        self._authorize(user_id)

        hotel = self._hotels.get_hotel(hotel_id) if hotel_id is not None else None
        if hotel is None:
            raise self._not_found(
                user_id,
                NotFoundCause.HOTEL,
                hotel_id=hotel_id.value if hotel_id is not None else None,
            )
        return hotel

    def _authorize(self, user_id: UserId) -> None:
        ticket = self.resolve_access(user_id)
        self.check_entitlement(ticket)
        logger.debug("hotel_access_granted", user_id=user_id.value)

    @staticmethod
    def _not_found(user_id: UserId, cause: NotFoundCause, **context: object) -> NotFoundError:
        logger.info(
            "hotel_lookup_not_found",
            user_id=user_id.value,
            cause=cause.value,
            **context,
        )
        return NotFoundError(cause)
