"""
Recruiter views for company accounts: listings, applications and the
candidate pipeline.
"""

import logging

from rest_framework import status
from rest_framework.response import Response

from apps.accounts.permissions import IsCompany
from apps.companies.views.mixins import CompanyContextMixin
from apps.jobs.serializers import (
    ApplicationUpdateSerializer,
    JobApplicationSerializer,
    JobListingSerializer,
    PipelineCandidateSerializer,
)
from apps.jobs.services.application_service import ApplicationService
from apps.jobs.services.job_listing_service import JobListingService
from apps.jobs.services.pipeline_service import PipelineService
from apps.workflow.views import BaseRestView

logger = logging.getLogger(__name__)


class RecruiterView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompany]

    def get_company(self, request):
        return self.get_company_context(request).company


class CompanyJobListCreateView(RecruiterView):
    def get(self, request):
        try:
            company = self.get_company(request)
            listings = JobListingService.list_company_jobs(
                company, status=request.query_params.get("status")
            )
            return Response(JobListingSerializer(listings, many=True).data)
        except Exception as e:
            return self.handle_service_error(e)

    def post(self, request):
        try:
            company = self.get_company(request)
            job = JobListingService.create_job(company, request.data)
            return Response(
                JobListingSerializer(job).data, status=status.HTTP_201_CREATED
            )
        except Exception as e:
            return self.handle_service_error(e)


class CompanyJobDetailView(RecruiterView):
    def get(self, request, job_id):
        try:
            job = JobListingService.get_company_job(self.get_company(request), job_id)
            return Response(JobListingSerializer(job).data)
        except Exception as e:
            return self.handle_service_error(e)

    def put(self, request, job_id):
        try:
            job = JobListingService.update_job(
                self.get_company(request), job_id, request.data
            )
            return Response(JobListingSerializer(job).data)
        except Exception as e:
            return self.handle_service_error(e)

    def patch(self, request, job_id):
        return self.put(request, job_id)

    def delete(self, request, job_id):
        try:
            JobListingService.delete_job(self.get_company(request), job_id)
            return Response({"message": "Job deleted"})
        except Exception as e:
            return self.handle_service_error(e)


class CompanyJobApplicationsView(RecruiterView):
    def get(self, request, job_id):
        try:
            applications = JobListingService.job_applications(
                self.get_company(request), job_id
            )
            return Response(JobApplicationSerializer(applications, many=True).data)
        except Exception as e:
            return self.handle_service_error(e)


class CompanyApplicationsView(RecruiterView):
    def get(self, request):
        try:
            applications = ApplicationService.company_applications(
                self.get_company(request),
                status=request.query_params.get("status"),
                job_id=request.query_params.get("job"),
            )
            return Response(JobApplicationSerializer(applications, many=True).data)
        except Exception as e:
            return self.handle_service_error(e)


class CompanyApplicationDetailView(RecruiterView):
    def put(self, request, application_id):
        serializer = ApplicationUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            application = ApplicationService.update_application(
                self.get_company(request), application_id, serializer.validated_data
            )
            return Response(JobApplicationSerializer(application).data)
        except Exception as e:
            return self.handle_service_error(e)

    def patch(self, request, application_id):
        return self.put(request, application_id)


class ApplicantDetailView(RecruiterView):
    def get(self, request, application_id):
        try:
            detail = ApplicationService.applicant_detail(
                self.get_company(request), application_id
            )
            detail["application"] = JobApplicationSerializer(detail["application"]).data
            return Response(detail)
        except Exception as e:
            return self.handle_service_error(e)


class PipelineListCreateView(RecruiterView):
    def get(self, request, job_id):
        try:
            candidates = PipelineService.list_candidates(
                self.get_company(request), job_id, stage=request.query_params.get("stage")
            )
            return Response(PipelineCandidateSerializer(candidates, many=True).data)
        except Exception as e:
            return self.handle_service_error(e)

    def post(self, request, job_id):
        try:
            candidate = PipelineService.add_candidate(
                self.get_company(request), request.user, job_id, request.data
            )
            return Response(
                PipelineCandidateSerializer(candidate).data,
                status=status.HTTP_201_CREATED,
            )
        except Exception as e:
            return self.handle_service_error(e)


class PipelineDetailView(RecruiterView):
    def patch(self, request, candidate_id):
        try:
            candidate = PipelineService.update_candidate(
                self.get_company(request), candidate_id, request.data
            )
            return Response(PipelineCandidateSerializer(candidate).data)
        except Exception as e:
            return self.handle_service_error(e)

    def delete(self, request, candidate_id):
        try:
            PipelineService.remove_candidate(self.get_company(request), candidate_id)
            return Response({"message": "Candidate removed from pipeline"})
        except Exception as e:
            return self.handle_service_error(e)
