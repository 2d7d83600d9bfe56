"""
Shared base view for the REST modules.

Views orchestrate only: they parse the request, call the service layer and
translate service exceptions into HTTP responses here.
"""

import logging

from django.core.exceptions import ObjectDoesNotExist
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.workflow.exceptions import (
    ConflictError,
    DuplicateError,
    InvalidTransitionError,
    InvitationCodeError,
    WorkEntryLockedError,
)
from apps.workflow.services.error_persistence import persist_app_error

logger = logging.getLogger(__name__)


class BaseRestView(APIView):
    """
    Base view for REST operations.
    Centralises service-layer error handling.
    """

    def handle_service_error(self, error: Exception) -> Response:
        error_message = str(error)

        match error:
            case APIException():
                # Serializer validation, auth and DRF errors keep their own shape
                raise error
            case DuplicateError():
                body = {"error": error_message}
                if error.field:
                    body["field"] = error.field
                return Response(body, status=status.HTTP_400_BAD_REQUEST)
            case InvitationCodeError() | ValueError():
                return Response(
                    {"error": error_message}, status=status.HTTP_400_BAD_REQUEST
                )
            case WorkEntryLockedError() | PermissionError():
                logger.warning(f"Forbidden: {error_message}")
                return Response(
                    {"error": error_message}, status=status.HTTP_403_FORBIDDEN
                )
            case Http404() | ObjectDoesNotExist():
                return Response(
                    {"error": error_message or "Resource not found"},
                    status=status.HTTP_404_NOT_FOUND,
                )
            case InvalidTransitionError() | ConflictError():
                return Response(
                    {"error": error_message}, status=status.HTTP_409_CONFLICT
                )
            case _:
                logger.exception(f"Unhandled error: {error}")
                persist_app_error(error, path=self.request.path if self.request else "")
                return Response(
                    {"error": "Internal server error"},
                    status=status.HTTP_500_INTERNAL_SERVER_ERROR,
                )
