"""
Job application service layer.

Employees apply, withdraw and save jobs; companies move applications
through their hiring stages and read what applicants chose to share.
"""

import logging
from typing import Any, Dict

from django.db import IntegrityError, transaction
from django.shortcuts import get_object_or_404
from django.utils import timezone

from apps.accounts.serializers import EmployeePublicSerializer
from apps.jobs.enums import ApplicationStatus, JobStatus
from apps.jobs.models import JobApplication, JobListing, SavedJob
from apps.profiles.services.profile_service import ProfileService
from apps.workdiary.enums import ApprovalStatus
from apps.workdiary.models import WorkEntry
from apps.workdiary.serializers import WorkEntrySerializer
from apps.workflow.exceptions import DuplicateError, InvalidTransitionError
from apps.workflow.helpers import parse_uuid

logger = logging.getLogger(__name__)

STAGE_ORDER = list(ApplicationStatus.values)
CLOSED_STATUSES = (
    ApplicationStatus.HIRED,
    ApplicationStatus.REJECTED,
    ApplicationStatus.WITHDRAWN,
)


def _stage_rank(status):
    return STAGE_ORDER.index(status)


class ApplicationService:
    @staticmethod
    def apply(employee, job_id, data: Dict[str, Any]) -> JobApplication:
        """
        Raises:
            Http404: unknown job
            ValueError: job closed or past its deadline
            DuplicateError: already applied
        """
        job = get_object_or_404(JobListing, id=job_id)
        today = timezone.localdate()
        if job.status != JobStatus.ACTIVE or (
            job.application_deadline and job.application_deadline < today
        ):
            raise ValueError("This job is no longer accepting applications")

        if JobApplication.objects.filter(job=job, employee=employee).exists():
            raise DuplicateError("You have already applied for this job")

        try:
            with transaction.atomic():
                application = JobApplication.objects.create(
                    job=job,
                    employee=employee,
                    cover_letter=data.get("cover_letter", ""),
                    include_profile=data.get("include_profile", True),
                    include_work_diary=data.get("include_work_diary", False),
                )
        except IntegrityError:
            raise DuplicateError("You have already applied for this job")

        logger.info(f"{employee.email} applied for job {job.id}")
        return application

    @staticmethod
    def withdraw(employee, application_id) -> JobApplication:
        """
        Raises:
            Http404: not the employee's application
            InvalidTransitionError: already hired, rejected or withdrawn
        """
        application = get_object_or_404(
            JobApplication, id=application_id, employee=employee
        )
        if application.status in CLOSED_STATUSES:
            raise InvalidTransitionError(
                "application", application.status, ApplicationStatus.WITHDRAWN
            )

        application.status = ApplicationStatus.WITHDRAWN
        application.save()
        logger.info(f"{employee.email} withdrew application {application.id}")
        return application

    @staticmethod
    def my_applications(employee, status=None):
        applications = JobApplication.objects.filter(employee=employee).select_related(
            "job__company", "employee"
        )
        if status:
            applications = applications.filter(status=status)
        return applications

    @staticmethod
    def save_job(employee, job_id, notes="") -> SavedJob:
        job = get_object_or_404(JobListing, id=job_id)
        if SavedJob.objects.filter(employee=employee, job=job).exists():
            raise DuplicateError("Job already saved")
        saved = SavedJob.objects.create(employee=employee, job=job, notes=notes or "")
        logger.info(f"{employee.email} saved job {job.id}")
        return saved

    @staticmethod
    def unsave_job(employee, job_id) -> None:
        saved = get_object_or_404(SavedJob, employee=employee, job_id=job_id)
        saved.delete()
        logger.info(f"{employee.email} removed saved job {job_id}")

    @staticmethod
    def saved_jobs(employee):
        return SavedJob.objects.filter(employee=employee).select_related("job__company")

    # Recruiter side

    @staticmethod
    def company_applications(company, status=None, job_id=None):
        applications = JobApplication.objects.filter(job__company=company).select_related(
            "job__company", "employee"
        )
        if status:
            if status not in ApplicationStatus.values:
                raise ValueError("Invalid status filter")
            applications = applications.filter(status=status)
        if job_id:
            applications = applications.filter(job_id=parse_uuid(job_id, "job"))
        return applications

    @staticmethod
    def get_company_application(company, application_id) -> JobApplication:
        application = get_object_or_404(
            JobApplication.objects.select_related("job__company", "employee"),
            id=application_id,
        )
        if application.job.company_id != company.id:
            logger.warning(
                f"Company {company.id} denied access to application {application.id}"
            )
            raise PermissionError("Access denied to this application")
        return application

    @staticmethod
    def update_application(company, application_id, data: Dict[str, Any]) -> JobApplication:
        """
        Raises:
            InvalidTransitionError: application was withdrawn by the applicant
            ValueError: company tried to set ``withdrawn``
        """
        application = ApplicationService.get_company_application(company, application_id)

        if application.status == ApplicationStatus.WITHDRAWN:
            raise InvalidTransitionError(
                "application", application.status, data.get("status") or "updated"
            )

        new_status = data.get("status")
        if new_status == ApplicationStatus.WITHDRAWN:
            raise ValueError("Only the applicant can withdraw an application")

        if new_status:
            # Marking as viewed never moves an application backwards
            if not (
                new_status == ApplicationStatus.VIEWED
                and _stage_rank(application.status) > _stage_rank(ApplicationStatus.VIEWED)
            ):
                application.status = new_status

        for field in ("company_notes", "interview_notes"):
            if field in data:
                setattr(application, field, data[field])

        if application.status == ApplicationStatus.REJECTED:
            if "rejection_reason" in data:
                application.rejection_reason = data["rejection_reason"]
        else:
            application.rejection_reason = ""

        application.save()
        logger.info(
            f"Company {company.id} set application {application.id} to {application.status}"
        )
        return application

    @staticmethod
    def applicant_detail(company, application_id) -> Dict[str, Any]:
        """
        The application plus whatever the applicant shared. Opening a fresh
        application marks it viewed.
        """
        application = ApplicationService.get_company_application(company, application_id)

        if application.status == ApplicationStatus.APPLIED:
            application.status = ApplicationStatus.VIEWED
            application.save(update_fields=["status", "updated_at"])
            logger.info(f"Application {application.id} viewed by company {company.id}")

        profile = None
        if application.include_profile:
            profile = {
                "employee": EmployeePublicSerializer(application.employee).data,
                **ProfileService.sections(application.employee),
            }

        work_diary = None
        if application.include_work_diary:
            entries = WorkEntry.objects.filter(
                employee=application.employee, status=ApprovalStatus.APPROVED
            ).select_related("company", "reviewed_by", "employee")
            work_diary = WorkEntrySerializer(entries, many=True).data

        return {
            "application": application,
            "profile": profile,
            "work_diary": work_diary,
        }
