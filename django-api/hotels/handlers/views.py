"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from hotels.domain import HotelId, UserId
from hotels.domain.errors import DomainError, ErrorCode
from hotels.handlers.serializers import ErrorSerializer, HotelSerializer
from hotels.services.hotel_service import HotelService
from hotels.stores.django_store import (
    DjangoEnrollmentStore,
    DjangoHotelStore,
    DjangoTicketStore,
)

ERROR_STATUS = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PAYMENT_REQUIRED: status.HTTP_402_PAYMENT_REQUIRED,
}


def get_hotel_service() -> HotelService:
    return HotelService(
        enrollments=DjangoEnrollmentStore(),
        tickets=DjangoTicketStore(),
        hotels=DjangoHotelStore(),
    )


def error_response(error: DomainError) -> Response:
    return Response(ErrorSerializer(error).data, status=ERROR_STATUS[error.code])


class HotelAPIView(APIView):
    """Base view with the hotel service attached.

    Authentication and permissions come from the REST_FRAMEWORK defaults.
    """

    def get_service(self) -> HotelService:
        return get_hotel_service()

    def get_user_id(self, request: Request) -> UserId:
        return UserId(request.user.pk)


class HotelListView(HotelAPIView):
    """Handler for GET /hotels"""

    def get(self, request: Request) -> Response:
        try:
            hotels = self.get_service().list_hotels(self.get_user_id(request))
        except DomainError as error:
            return error_response(error)
        return Response(HotelSerializer(hotels, many=True).data)


class HotelDetailView(HotelAPIView):
    """Handler for GET /hotels/{hotel_id}"""

    def get(self, request: Request, hotel_id: str) -> Response:
        try:
            parsed_id = HotelId.from_string(hotel_id)
        except ValueError:
            parsed_id = None

        try:
            hotel = self.get_service().get_hotel(self.get_user_id(request), parsed_id)
        except DomainError as error:
            return error_response(error)
        return Response(HotelSerializer(hotel).data)
