"""
Job search over active listings. Job alerts reuse the same filters.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from django.conf import settings
from django.db.models import Q, QuerySet
from django.shortcuts import get_object_or_404
from django.utils import timezone

from apps.jobs.enums import EmploymentType, ExperienceLevel, JobStatus, RemoteType
from apps.jobs.models import JobAlert, JobListing
from apps.workflow.helpers import split_csv_param

logger = logging.getLogger(__name__)


def _parse_amount(value, field_name):
    if value in (None, ""):
        return None
    try:
        return Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f"Invalid {field_name}")


def _checked_choices(value, allowed, field_name):
    choices = split_csv_param(value)
    unknown = [choice for choice in choices if choice not in allowed]
    if unknown:
        raise ValueError(f"Invalid {field_name}: {', '.join(unknown)}")
    return choices


class JobSearchService:
    @staticmethod
    def open_listings() -> QuerySet:
        """Active listings whose deadline has not passed."""
        today = timezone.localdate()
        return (
            JobListing.objects.filter(status=JobStatus.ACTIVE, company__is_active=True)
            .filter(
                Q(application_deadline__isnull=True)
                | Q(application_deadline__gte=today)
            )
            .select_related("company")
        )

    @staticmethod
    def apply_filters(listings: QuerySet, filters: Dict[str, Any]) -> QuerySet:
        """
        Raises:
            ValueError: unknown type values or malformed salary bounds
        """
        keywords = (filters.get("keywords") or "").strip()
        if keywords:
            listings = listings.filter(
                Q(title__icontains=keywords)
                | Q(description__icontains=keywords)
                | Q(company__name__icontains=keywords)
            )

        location = (filters.get("location") or "").strip()
        if location:
            listings = listings.filter(location__icontains=location)

        employment_types = _checked_choices(
            filters.get("employment_type"), EmploymentType.values, "employment_type"
        )
        if employment_types:
            listings = listings.filter(employment_type__in=employment_types)

        experience_levels = _checked_choices(
            filters.get("experience_level"), ExperienceLevel.values, "experience_level"
        )
        if experience_levels:
            listings = listings.filter(experience_level__in=experience_levels)

        remote_types = _checked_choices(
            filters.get("remote_type"), RemoteType.values, "remote_type"
        )
        if remote_types:
            listings = listings.filter(remote_type__in=remote_types)

        # Ranges overlap when the job's max reaches the wanted min and vice versa
        salary_min = _parse_amount(filters.get("salary_min"), "salary_min")
        if salary_min is not None:
            listings = listings.filter(salary_max__gte=salary_min)

        salary_max = _parse_amount(filters.get("salary_max"), "salary_max")
        if salary_max is not None:
            listings = listings.filter(salary_min__lte=salary_max)

        return listings

    @staticmethod
    def search(filters: Dict[str, Any]):
        listings = JobSearchService.apply_filters(
            JobSearchService.open_listings(), filters
        )
        return listings.order_by("-created_at")[: settings.SEARCH_RESULTS_LIMIT]

    @staticmethod
    def get_open_listing(job_id) -> JobListing:
        return get_object_or_404(JobSearchService.open_listings(), id=job_id)

    @staticmethod
    def matching_jobs(alert: JobAlert):
        filters = {
            "keywords": alert.keywords,
            "location": alert.location,
            "employment_type": alert.employment_types,
            "experience_level": alert.experience_levels,
            "remote_type": alert.remote_types,
            "salary_min": alert.salary_min,
        }
        return JobSearchService.search(filters)
