"""
Recruiter pipeline: candidates a company has bookmarked per job.
"""

import logging
from typing import Any, Dict

from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404

from apps.accounts.enums import AccountType
from apps.jobs.enums import PipelineStage
from apps.jobs.models import PipelineCandidate
from apps.jobs.services.job_listing_service import JobListingService
from apps.workflow.exceptions import DuplicateError
from apps.workflow.helpers import parse_uuid

logger = logging.getLogger(__name__)


def _clean_stage(stage):
    if stage not in PipelineStage.values:
        raise ValueError("Invalid pipeline stage")
    return stage


class PipelineService:
    @staticmethod
    def list_candidates(company, job_id, stage=None):
        job = JobListingService.get_company_job(company, job_id)
        candidates = PipelineCandidate.objects.filter(job=job).select_related(
            "employee", "job"
        )
        if stage:
            candidates = candidates.filter(stage=_clean_stage(stage))
        return candidates

    @staticmethod
    def add_candidate(company, actor, job_id, data: Dict[str, Any]) -> PipelineCandidate:
        """
        Raises:
            ValueError: missing employee or bad stage
            DuplicateError: candidate already tracked for this job
        """
        job = JobListingService.get_company_job(company, job_id)

        employee_id = data.get("employee_id") or data.get("employee")
        if not employee_id:
            raise ValueError("employee_id is required")

        Account = get_user_model()
        employee = get_object_or_404(
            Account,
            id=parse_uuid(employee_id, "employee_id"),
            account_type=AccountType.EMPLOYEE,
        )

        if PipelineCandidate.objects.filter(job=job, employee=employee).exists():
            raise DuplicateError("Candidate already in pipeline")

        candidate = PipelineCandidate.objects.create(
            company=company,
            job=job,
            employee=employee,
            stage=_clean_stage(data.get("stage") or PipelineStage.SOURCED),
            notes=data.get("notes") or "",
            added_by=actor,
        )
        logger.info(f"Company {company.id} added {employee.id} to pipeline of {job.id}")
        return candidate

    @staticmethod
    def _get_candidate(company, candidate_id) -> PipelineCandidate:
        candidate = get_object_or_404(
            PipelineCandidate.objects.select_related("employee", "job"),
            id=candidate_id,
        )
        if candidate.company_id != company.id:
            raise PermissionError("Access denied to this pipeline entry")
        return candidate

    @staticmethod
    def update_candidate(company, candidate_id, data: Dict[str, Any]) -> PipelineCandidate:
        candidate = PipelineService._get_candidate(company, candidate_id)
        if "stage" in data:
            candidate.stage = _clean_stage(data["stage"])
        if "notes" in data:
            candidate.notes = data["notes"] or ""
        candidate.save()
        logger.info(f"Pipeline entry {candidate.id} moved to {candidate.stage}")
        return candidate

    @staticmethod
    def remove_candidate(company, candidate_id) -> None:
        candidate = PipelineService._get_candidate(company, candidate_id)
        candidate.delete()
        logger.info(f"Company {company.id} removed pipeline entry {candidate_id}")
