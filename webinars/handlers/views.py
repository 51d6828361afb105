"""HTTP handler for changing a webinar's seats.

The view validates the body, hands it to ChangeSeats as the configured
acting user, and turns an Err result into a status code through
ERROR_STATUS. Unexpected errors are left to the DRF exception handler.
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from webinars.container import container
from webinars.domain.errors import DomainError, ErrorCode
from webinars.domain.result import Err
from webinars.handlers.identity import get_acting_user
from webinars.handlers.serializers import ChangeSeatsSerializer
from webinars.services import ChangeSeatsInput

ERROR_STATUS = {
    ErrorCode.WEBINAR_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.WEBINAR_NOT_ORGANIZER: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.WEBINAR_REDUCE_SEATS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_TOO_MANY_SEATS: status.HTTP_400_BAD_REQUEST,
}


def error_response(error: DomainError) -> Response:
    return Response({"error": error.message}, status=ERROR_STATUS[error.code])


class ChangeSeatsView(APIView):
    """Handler for POST /webinars/{webinar_id}/seats"""

    def post(self, request: Request, webinar_id: str) -> Response:
        serializer = ChangeSeatsSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST
            )

        result = container.change_seats.execute(
            ChangeSeatsInput(
                user=get_acting_user(),
                webinar_id=webinar_id,
                seats=serializer.validated_data["seats"],
            )
        )
        if isinstance(result, Err):
            return error_response(result.error)
        return Response({"message": "Seats updated"}, status=status.HTTP_200_OK)
