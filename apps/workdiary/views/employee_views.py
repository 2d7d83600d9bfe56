import logging

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.accounts.permissions import IsEmployee
from apps.workdiary.serializers import WorkEntryEventSerializer, WorkEntrySerializer
from apps.workdiary.services.review_service import ReviewService
from apps.workdiary.services.work_entry_service import WorkEntryService
from apps.workflow.views import BaseRestView

logger = logging.getLogger(__name__)


class WorkEntryListCreateView(BaseRestView):
    permission_classes = [IsEmployee]

    def get(self, request):
        try:
            entries = WorkEntryService.list_entries(
                request.user,
                company_id=request.query_params.get("company"),
                status=request.query_params.get("status"),
            )
            return Response(WorkEntrySerializer(entries, many=True).data)
        except Exception as e:
            return self.handle_service_error(e)

    def post(self, request):
        try:
            entry = WorkEntryService.create_entry(request.user, request.data)
            return Response(
                WorkEntrySerializer(entry).data, status=status.HTTP_201_CREATED
            )
        except Exception as e:
            return self.handle_service_error(e)


class WorkEntryDetailView(BaseRestView):
    permission_classes = [IsEmployee]

    def get(self, request, entry_id):
        try:
            entry = WorkEntryService.get_own_entry(request.user, entry_id)
            return Response(WorkEntrySerializer(entry).data)
        except Exception as e:
            return self.handle_service_error(e)

    def patch(self, request, entry_id):
        try:
            entry = WorkEntryService.update_entry(request.user, entry_id, request.data)
            return Response(WorkEntrySerializer(entry).data)
        except Exception as e:
            return self.handle_service_error(e)

    def put(self, request, entry_id):
        return self.patch(request, entry_id)

    def delete(self, request, entry_id):
        try:
            WorkEntryService.delete_entry(request.user, entry_id)
            return Response({"message": "Work entry deleted"})
        except Exception as e:
            return self.handle_service_error(e)


class WorkEntryEventsView(BaseRestView):
    permission_classes = [IsAuthenticated]

    def get(self, request, entry_id):
        try:
            events = ReviewService.entry_history(request.user, entry_id)
            return Response(WorkEntryEventSerializer(events, many=True).data)
        except Exception as e:
            return self.handle_service_error(e)
