"""
Reviewer REST views over a company's work entries.
"""

import logging

from rest_framework.response import Response

from apps.accounts.permissions import IsCompanyMember
from apps.companies.views.mixins import CompanyContextMixin
from apps.workdiary.enums import ApprovalStatus
from apps.workdiary.serializers import ReviewSerializer, WorkEntrySerializer
from apps.workdiary.services.review_service import ReviewService
from apps.workflow.views import BaseRestView

logger = logging.getLogger(__name__)


class CompanyWorkEntriesView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]
    default_status = None

    def get(self, request):
        try:
            context = self.get_company_context(request)
            entries = ReviewService.list_company_entries(
                context,
                status=request.query_params.get("status") or self.default_status,
                employee_id=request.query_params.get("employee"),
            )
            return Response(WorkEntrySerializer(entries, many=True).data)
        except Exception as e:
            return self.handle_service_error(e)


class PendingWorkEntriesView(CompanyWorkEntriesView):
    default_status = ApprovalStatus.PENDING_REVIEW


class ApproveWorkEntryView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]

    def post(self, request, entry_id):
        serializer = ReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            context = self.get_company_context(request)
            entry = ReviewService.approve_entry(
                context,
                entry_id,
                rating=serializer.validated_data.get("rating"),
                feedback=serializer.validated_data.get("feedback"),
            )
            return Response(
                {
                    "message": "Work entry approved",
                    "entry": WorkEntrySerializer(entry).data,
                }
            )
        except Exception as e:
            return self.handle_service_error(e)


class RequestChangesView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]

    def post(self, request, entry_id):
        try:
            context = self.get_company_context(request)
            entry = ReviewService.request_changes(
                context, entry_id, request.data.get("feedback")
            )
            return Response(
                {
                    "message": "Changes requested",
                    "entry": WorkEntrySerializer(entry).data,
                }
            )
        except Exception as e:
            return self.handle_service_error(e)


class EmployeeWorkEntriesView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]

    def get(self, request, employee_id):
        try:
            context = self.get_company_context(request)
            entries = ReviewService.employee_entries_for_company(context, employee_id)
            return Response(WorkEntrySerializer(entries, many=True).data)
        except Exception as e:
            return self.handle_service_error(e)
