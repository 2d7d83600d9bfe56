"""
Job board views for employees: search, apply, saved jobs and alerts.
"""

import logging

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.accounts.permissions import IsEmployee
from apps.jobs.serializers import (
    ApplicantApplicationSerializer,
    ApplySerializer,
    JobAlertSerializer,
    JobListingSerializer,
    SavedJobSerializer,
)
from apps.jobs.services.alert_service import JobAlertService
from apps.jobs.services.application_service import ApplicationService
from apps.jobs.services.job_search_service import JobSearchService
from apps.workflow.views import BaseRestView

logger = logging.getLogger(__name__)


class JobSearchView(BaseRestView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            listings = JobSearchService.search(request.query_params)
            data = JobListingSerializer(listings, many=True).data
            return Response({"count": len(data), "results": data})
        except Exception as e:
            return self.handle_service_error(e)


class JobDetailView(BaseRestView):
    permission_classes = [IsAuthenticated]

    def get(self, request, job_id):
        try:
            job = JobSearchService.get_open_listing(job_id)
            return Response(JobListingSerializer(job).data)
        except Exception as e:
            return self.handle_service_error(e)


class ApplyView(BaseRestView):
    permission_classes = [IsEmployee]

    def post(self, request, job_id):
        serializer = ApplySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            application = ApplicationService.apply(
                request.user, job_id, serializer.validated_data
            )
            return Response(
                {
                    "message": "Application submitted",
                    "application": ApplicantApplicationSerializer(application).data,
                },
                status=status.HTTP_201_CREATED,
            )
        except Exception as e:
            return self.handle_service_error(e)


class WithdrawApplicationView(BaseRestView):
    permission_classes = [IsEmployee]

    def post(self, request, application_id):
        try:
            application = ApplicationService.withdraw(request.user, application_id)
            return Response(
                {
                    "message": "Application withdrawn",
                    "application": ApplicantApplicationSerializer(application).data,
                }
            )
        except Exception as e:
            return self.handle_service_error(e)


class MyApplicationsView(BaseRestView):
    permission_classes = [IsEmployee]

    def get(self, request):
        applications = ApplicationService.my_applications(
            request.user, status=request.query_params.get("status")
        )
        return Response(ApplicantApplicationSerializer(applications, many=True).data)


class SaveJobView(BaseRestView):
    permission_classes = [IsEmployee]

    def post(self, request, job_id):
        try:
            saved = ApplicationService.save_job(
                request.user, job_id, request.data.get("notes", "")
            )
            return Response(
                SavedJobSerializer(saved).data, status=status.HTTP_201_CREATED
            )
        except Exception as e:
            return self.handle_service_error(e)

    def delete(self, request, job_id):
        try:
            ApplicationService.unsave_job(request.user, job_id)
            return Response({"message": "Job removed from saved jobs"})
        except Exception as e:
            return self.handle_service_error(e)


class SavedJobsView(BaseRestView):
    permission_classes = [IsEmployee]

    def get(self, request):
        saved = ApplicationService.saved_jobs(request.user)
        return Response(SavedJobSerializer(saved, many=True).data)


class JobAlertListCreateView(BaseRestView):
    permission_classes = [IsEmployee]

    def get(self, request):
        alerts = JobAlertService.list_alerts(request.user)
        return Response(JobAlertSerializer(alerts, many=True).data)

    def post(self, request):
        try:
            alert = JobAlertService.create_alert(request.user, request.data)
            return Response(
                JobAlertSerializer(alert).data, status=status.HTTP_201_CREATED
            )
        except Exception as e:
            return self.handle_service_error(e)


class JobAlertDetailView(BaseRestView):
    permission_classes = [IsEmployee]

    def put(self, request, alert_id):
        try:
            alert = JobAlertService.update_alert(request.user, alert_id, request.data)
            return Response(JobAlertSerializer(alert).data)
        except Exception as e:
            return self.handle_service_error(e)

    def patch(self, request, alert_id):
        return self.put(request, alert_id)

    def delete(self, request, alert_id):
        try:
            JobAlertService.delete_alert(request.user, alert_id)
            return Response({"message": "Job alert deleted"})
        except Exception as e:
            return self.handle_service_error(e)


class JobAlertMatchesView(BaseRestView):
    permission_classes = [IsEmployee]

    def get(self, request, alert_id):
        try:
            alert = JobAlertService.get_own_alert(request.user, alert_id)
            listings = JobSearchService.matching_jobs(alert)
            return Response(JobListingSerializer(listings, many=True).data)
        except Exception as e:
            return self.handle_service_error(e)
