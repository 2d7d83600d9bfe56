"""
Review service layer.

Company admins review every entry of their company; managers and branch
admins review their direct reports only. Nobody reviews their own work.
"""

import logging
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet
from django.shortcuts import get_object_or_404
from django.utils import timezone

from apps.companies.roles import WORK_APPROVE_ANY, WORK_APPROVE_DIRECT_REPORTS
from apps.companies.services.company_service import CompanyContext, CompanyService
from apps.companies.services.membership_service import MembershipService
from apps.workdiary.enums import ApprovalStatus, WorkEntryEventType
from apps.workdiary.models import WorkEntry, WorkEntryEvent
from apps.workdiary.services.work_entry_service import WorkEntryService
from apps.workflow.exceptions import InvalidTransitionError
from apps.workflow.helpers import clean_text, parse_uuid

logger = logging.getLogger(__name__)


class ReviewService:
    @staticmethod
    def visible_entries(context: CompanyContext) -> QuerySet:
        entries = WorkEntry.objects.filter(company=context.company).select_related(
            "employee", "company", "reviewed_by"
        )
        visible = MembershipService.visible_employee_ids(context)
        if visible is not None:
            entries = entries.filter(employee_id__in=visible)
        return entries

    @staticmethod
    def list_company_entries(
        context: CompanyContext, status: Optional[str] = None, employee_id=None
    ) -> QuerySet:
        entries = ReviewService.visible_entries(context)
        if status:
            if status not in ApprovalStatus.values:
                raise ValueError("Invalid status filter")
            entries = entries.filter(status=status)
        if employee_id:
            entries = entries.filter(employee_id=parse_uuid(employee_id, "employee"))
        return entries

    @staticmethod
    def can_review(context: CompanyContext, entry: WorkEntry) -> bool:
        if entry.company_id != context.company.id:
            return False
        if entry.employee_id == context.actor.id:
            return False
        if context.has_permission(WORK_APPROVE_ANY):
            return True
        if context.has_permission(WORK_APPROVE_DIRECT_REPORTS):
            return MembershipService.is_direct_report(context, entry.employee_id)
        return False

    @staticmethod
    def _get_for_review(context: CompanyContext, entry_id) -> WorkEntry:
        entry = get_object_or_404(
            WorkEntry.objects.select_for_update(),
            id=entry_id,
            company=context.company,
        )
        if entry.employee_id == context.actor.id:
            logger.warning(f"{context.actor.email} tried to review own entry {entry.id}")
            raise PermissionError("You cannot review your own work entry")
        if not ReviewService.can_review(context, entry):
            logger.warning(
                f"{context.actor.email} ({context.role}) denied review of {entry.id}"
            )
            raise PermissionError("You do not have permission to review this work entry")
        return entry

    @staticmethod
    def _clean_rating(rating):
        if rating in (None, ""):
            return None
        try:
            rating = int(rating)
        except (TypeError, ValueError):
            raise ValueError("Rating must be a whole number between 1 and 5")
        if not 1 <= rating <= 5:
            raise ValueError("Rating must be a whole number between 1 and 5")
        return rating

    @staticmethod
    def approve_entry(
        context: CompanyContext, entry_id, rating=None, feedback: Optional[str] = None
    ) -> WorkEntry:
        """
        Approve and lock a pending entry.

        Raises:
            Http404: entry not in the actor's company
            PermissionError: actor may not review this entry
            InvalidTransitionError: entry is not pending review
            ValueError: rating out of range
        """
        rating = ReviewService._clean_rating(rating)

        with transaction.atomic():
            entry = ReviewService._get_for_review(context, entry_id)
            if entry.status != ApprovalStatus.PENDING_REVIEW:
                raise InvalidTransitionError(
                    "work entry", entry.status, ApprovalStatus.APPROVED
                )

            now = timezone.now()
            previous_status = entry.status
            entry.status = ApprovalStatus.APPROVED
            entry.approved_at = now
            entry.reviewed_at = now
            entry.reviewed_by = context.actor
            entry.rating = rating
            if feedback:
                entry.company_feedback = feedback.strip()
            entry.save()

            WorkEntryService._record_event(
                entry,
                context.actor,
                WorkEntryEventType.APPROVED,
                previous_status,
                note=entry.company_feedback,
            )

        logger.info(
            f"Work entry {entry.id} approved by {context.actor.email} ({context.role})"
        )
        return entry

    @staticmethod
    def request_changes(context: CompanyContext, entry_id, feedback: Optional[str]) -> WorkEntry:
        """
        Raises:
            ValueError: blank feedback
            Http404: entry not in the actor's company
            PermissionError: actor may not review this entry
            InvalidTransitionError: entry is not pending review
        """
        feedback = clean_text(feedback, "Feedback")
        if not feedback:
            raise ValueError("Feedback is required when requesting changes")

        with transaction.atomic():
            entry = ReviewService._get_for_review(context, entry_id)
            if entry.status != ApprovalStatus.PENDING_REVIEW:
                raise InvalidTransitionError(
                    "work entry", entry.status, ApprovalStatus.NEEDS_CHANGES
                )

            previous_status = entry.status
            entry.status = ApprovalStatus.NEEDS_CHANGES
            entry.company_feedback = feedback
            entry.reviewed_at = timezone.now()
            entry.reviewed_by = context.actor
            entry.save()

            WorkEntryService._record_event(
                entry,
                context.actor,
                WorkEntryEventType.CHANGES_REQUESTED,
                previous_status,
                note=feedback,
            )

        logger.info(
            f"Changes requested on work entry {entry.id} by {context.actor.email}"
        )
        return entry

    @staticmethod
    def employee_entries_for_company(context: CompanyContext, employee_id) -> QuerySet:
        """
        Raises:
            PermissionError: employee never belonged to the company, or is not
                a direct report of a manager
        """
        if not MembershipService.has_membership_history(context.company, employee_id):
            raise PermissionError("Employee is not associated with your company")

        visible = MembershipService.visible_employee_ids(context)
        if visible is not None and employee_id not in visible:
            raise PermissionError("Employee is not one of your direct reports")

        return WorkEntry.objects.filter(
            company=context.company, employee_id=employee_id
        ).select_related("company", "reviewed_by")

    @staticmethod
    def entry_history(actor, entry_id) -> QuerySet:
        """
        Events of an entry, for its owner or anyone allowed to review it.

        Raises:
            Http404: unknown entry
            PermissionError: actor can neither own nor review it
        """
        entry = get_object_or_404(WorkEntry, id=entry_id)

        if entry.employee_id != actor.id:
            try:
                context = CompanyService.get_context(actor, entry.company_id)
            except (PermissionError, ValueError):
                raise PermissionError("You do not have access to this work entry")
            visible = MembershipService.visible_employee_ids(context)
            if visible is not None and entry.employee_id not in visible:
                raise PermissionError("You do not have access to this work entry")

        return WorkEntryEvent.objects.filter(entry=entry).select_related("actor")
