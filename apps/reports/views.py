"""
Reporting REST views for company admins and managers.
"""

import csv
import logging

from django.http import HttpResponse
from django.utils import timezone
from rest_framework.response import Response

from apps.accounts.permissions import IsCompanyMember
from apps.companies.views.mixins import CompanyContextMixin
from apps.reports.services.report_service import ReportService
from apps.workdiary.serializers import WorkEntrySerializer
from apps.workflow.helpers import parse_date_range
from apps.workflow.views import BaseRestView

logger = logging.getLogger(__name__)


class BaseReportView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]

    def get_report_scope(self, request):
        """Returns (context, start_date, end_date)."""
        context = self.get_company_context(request)
        start, end = parse_date_range(request.query_params)
        return context, start, end


class SummaryReportView(BaseReportView):
    def get(self, request):
        try:
            context, start, end = self.get_report_scope(request)
            return Response(ReportService.summary(context, start, end))
        except Exception as e:
            return self.handle_service_error(e)


class TimeByEmployeeReportView(BaseReportView):
    def get(self, request):
        try:
            context, start, end = self.get_report_scope(request)
            return Response(
                {
                    "start_date": start.isoformat(),
                    "end_date": end.isoformat(),
                    "employees": ReportService.time_by_employee(context, start, end),
                }
            )
        except Exception as e:
            return self.handle_service_error(e)


class DailyActivityReportView(BaseReportView):
    def get(self, request):
        try:
            context, start, end = self.get_report_scope(request)
            return Response(
                {
                    "start_date": start.isoformat(),
                    "end_date": end.isoformat(),
                    "days": ReportService.daily_activity(context, start, end),
                }
            )
        except Exception as e:
            return self.handle_service_error(e)


class ExportVerifiedWorkView(BaseReportView):
    """CSV download of approved entries in the range."""

    def get(self, request):
        try:
            context, start, end = self.get_report_scope(request)
            header, rows = ReportService.export_rows(context, start, end)
        except Exception as e:
            return self.handle_service_error(e)

        response = HttpResponse(content_type="text/csv")
        filename = f"verified_work_{start:%Y%m%d}_{end:%Y%m%d}.csv"
        response["Content-Disposition"] = f'attachment; filename="{filename}"'

        writer = csv.writer(response)
        writer.writerow(header)
        for row in rows:
            writer.writerow(row)

        return response


class ManagerDashboardView(BaseReportView):
    def get(self, request):
        try:
            context = self.get_company_context(request)
            dashboard = ReportService.manager_dashboard(context)
            dashboard["recent_pending"] = WorkEntrySerializer(
                dashboard["recent_pending"], many=True
            ).data
            dashboard["generated_at"] = timezone.now().isoformat()
            return Response(dashboard)
        except Exception as e:
            return self.handle_service_error(e)
