import logging
from typing import Any, Dict

from django.shortcuts import get_object_or_404

from apps.jobs.models import JobApplication, JobListing
from apps.jobs.serializers import JobListingSerializer

logger = logging.getLogger(__name__)


class JobListingService:
    """Listings owned by a company account."""

    @staticmethod
    def list_company_jobs(company, status=None):
        listings = JobListing.objects.filter(company=company).select_related("company")
        if status:
            listings = listings.filter(status=status)
        return listings

    @staticmethod
    def get_company_job(company, job_id) -> JobListing:
        """
        Raises:
            Http404: unknown job
            PermissionError: job belongs to another company
        """
        job = get_object_or_404(JobListing.objects.select_related("company"), id=job_id)
        if job.company_id != company.id:
            logger.warning(f"Company {company.id} denied access to job {job.id}")
            raise PermissionError("Access denied to this job")
        return job

    @staticmethod
    def create_job(company, data: Dict[str, Any]) -> JobListing:
        serializer = JobListingSerializer(data=data)
        serializer.is_valid(raise_exception=True)
        job = serializer.save(company=company)
        logger.info(f"Company {company.id} posted job {job.id} ({job.title})")
        return job

    @staticmethod
    def update_job(company, job_id, data: Dict[str, Any], partial=True) -> JobListing:
        job = JobListingService.get_company_job(company, job_id)
        serializer = JobListingSerializer(job, data=data, partial=partial)
        serializer.is_valid(raise_exception=True)
        job = serializer.save()
        logger.info(f"Company {company.id} updated job {job.id}")
        return job

    @staticmethod
    def delete_job(company, job_id) -> None:
        job = JobListingService.get_company_job(company, job_id)
        job.delete()
        logger.info(f"Company {company.id} deleted job {job_id}")

    @staticmethod
    def job_applications(company, job_id):
        job = JobListingService.get_company_job(company, job_id)
        return JobApplication.objects.filter(job=job).select_related(
            "employee", "job__company"
        )
