"""
Work entry service layer (employee side).

Employees log, edit and delete their own entries. Approved entries are
locked; editing anything else sends it back to review.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from django.conf import settings
from django.db import transaction
from django.db.models import QuerySet
from django.shortcuts import get_object_or_404

from apps.companies.enums import MembershipStatus
from apps.companies.models import CompanyMembership
from apps.workdiary.enums import ApprovalStatus, WorkEntryEventType, WorkPriority
from apps.workdiary.models import WorkEntry, WorkEntryEvent
from apps.workflow.exceptions import WorkEntryLockedError
from apps.workflow.helpers import clean_text, parse_date, parse_uuid

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "title",
    "description",
    "start_date",
    "end_date",
    "priority",
    "hours",
    "billable",
)


class WorkEntryService:
    @staticmethod
    def _clean(data: Dict[str, Any], entry: Optional[WorkEntry] = None) -> Dict[str, Any]:
        """
        Validate the supplied fields, falling back to ``entry`` for the
        cross-field checks (dates and hours).

        Raises:
            ValueError: on the first invalid field
        """
        cleaned: Dict[str, Any] = {}
        partial = entry is not None

        if not partial or "title" in data:
            title = clean_text(data.get("title"), "Title")
            if not title:
                raise ValueError("Title is required")
            cleaned["title"] = title

        if "description" in data:
            cleaned["description"] = clean_text(data.get("description"), "Description")

        if not partial or "start_date" in data:
            if not data.get("start_date"):
                raise ValueError("Start date is required")
            cleaned["start_date"] = parse_date(data["start_date"], "start_date")

        if "end_date" in data:
            cleaned["end_date"] = (
                parse_date(data["end_date"], "end_date") if data["end_date"] else None
            )

        if "priority" in data:
            if data["priority"] not in WorkPriority.values:
                raise ValueError("Invalid priority")
            cleaned["priority"] = data["priority"]

        if not partial or "hours" in data:
            try:
                hours = Decimal(str(data.get("hours")))
            except (InvalidOperation, TypeError, ValueError):
                raise ValueError("Hours must be a number")
            if not hours.is_finite() or hours <= 0:
                raise ValueError("Hours must be greater than 0")
            cleaned["hours"] = hours.quantize(Decimal("0.01"))

        if "billable" in data:
            cleaned["billable"] = bool(data["billable"])

        start_date = cleaned.get("start_date", entry.start_date if entry else None)
        end_date = cleaned.get("end_date", entry.end_date if entry else None)
        hours = cleaned.get("hours", entry.hours if entry else None)

        if end_date is not None and end_date < start_date:
            raise ValueError("End date cannot be before start date")

        days = ((end_date or start_date) - start_date).days + 1
        max_hours = settings.WORK_ENTRY_MAX_HOURS * days
        if hours > max_hours:
            raise ValueError(f"Hours cannot exceed {max_hours} for this date range")

        return cleaned

    @staticmethod
    def _record_event(entry, actor, event_type, from_status, note=""):
        return WorkEntryEvent.objects.create(
            entry=entry,
            actor=actor,
            event_type=event_type,
            from_status=from_status or "",
            to_status=entry.status,
            note=note,
        )

    @staticmethod
    def list_entries(employee, company_id=None, status=None) -> QuerySet:
        entries = WorkEntry.objects.filter(employee=employee).select_related(
            "company", "reviewed_by"
        )
        if company_id:
            entries = entries.filter(company_id=parse_uuid(company_id, "company"))
        if status:
            if status not in ApprovalStatus.values:
                raise ValueError("Invalid status filter")
            entries = entries.filter(status=status)
        return entries

    @staticmethod
    def get_own_entry(employee, entry_id) -> WorkEntry:
        return get_object_or_404(WorkEntry, id=entry_id, employee=employee)

    @staticmethod
    def create_entry(employee, data: Dict[str, Any]) -> WorkEntry:
        """
        Raises:
            ValueError: invalid fields, or no active membership with the company
        """
        company_id = data.get("company") or data.get("company_id")
        if not company_id:
            raise ValueError("Company is required")
        company_id = parse_uuid(company_id, "company")

        membership = (
            CompanyMembership.objects.filter(
                company_id=company_id,
                employee=employee,
                status=MembershipStatus.ACTIVE,
            )
            .select_related("company")
            .first()
        )
        if membership is None:
            raise ValueError("You are not an active member of this company")

        cleaned = WorkEntryService._clean(data)

        with transaction.atomic():
            entry = WorkEntry.objects.create(
                employee=employee,
                company=membership.company,
                status=ApprovalStatus.PENDING_REVIEW,
                **cleaned,
            )
            WorkEntryService._record_event(
                entry, employee, WorkEntryEventType.SUBMITTED, None
            )

        logger.info(
            f"{employee.email} logged work entry {entry.id} "
            f"({entry.hours}h) for company {entry.company_id}"
        )
        return entry

    @staticmethod
    def update_entry(employee, entry_id, data: Dict[str, Any]) -> WorkEntry:
        """
        Apply an edit and send the entry back to review.

        Raises:
            Http404: entry missing or owned by someone else
            WorkEntryLockedError: entry already approved
            ValueError: invalid fields
        """
        with transaction.atomic():
            entry = get_object_or_404(
                WorkEntry.objects.select_for_update(), id=entry_id, employee=employee
            )
            if entry.is_locked:
                logger.warning(f"{employee.email} tried to edit approved entry {entry.id}")
                raise WorkEntryLockedError(entry.id, "edit")

            cleaned = WorkEntryService._clean(data, entry=entry)
            previous_status = entry.status

            for field, value in cleaned.items():
                setattr(entry, field, value)

            entry.status = ApprovalStatus.PENDING_REVIEW
            entry.company_feedback = ""
            entry.rating = None
            entry.reviewed_by = None
            entry.reviewed_at = None
            entry.save()

            WorkEntryService._record_event(
                entry, employee, WorkEntryEventType.UPDATED, previous_status
            )

        logger.info(f"{employee.email} updated work entry {entry.id}, back to review")
        return entry

    @staticmethod
    def delete_entry(employee, entry_id) -> None:
        """
        Raises:
            Http404: entry missing or owned by someone else
            WorkEntryLockedError: entry already approved
        """
        with transaction.atomic():
            entry = get_object_or_404(
                WorkEntry.objects.select_for_update(), id=entry_id, employee=employee
            )
            if entry.is_locked:
                logger.warning(f"{employee.email} tried to delete approved entry {entry.id}")
                raise WorkEntryLockedError(entry.id, "delete")

            entry.delete()
        logger.info(f"{employee.email} deleted work entry {entry_id}")
