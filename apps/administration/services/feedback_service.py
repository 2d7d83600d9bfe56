import logging
from typing import Any, Dict

from django.db.models import Count
from django.shortcuts import get_object_or_404
from django.utils import timezone

from apps.administration.enums import FeedbackStatus
from apps.administration.models import Feedback
from apps.administration.serializers import FeedbackSerializer

logger = logging.getLogger(__name__)


class FeedbackService:
    @staticmethod
    def submit(account, data: Dict[str, Any]) -> Feedback:
        serializer = FeedbackSerializer(data=data)
        serializer.is_valid(raise_exception=True)
        owner = account if account is not None and account.is_authenticated else None
        feedback = serializer.save(account=owner)
        logger.info(f"Feedback {feedback.id} submitted ({feedback.feedback_type})")
        return feedback

    @staticmethod
    def list_feedback(status=None, feedback_type=None):
        feedback = Feedback.objects.select_related("account")
        if status:
            if status not in FeedbackStatus.values:
                raise ValueError("Invalid status filter")
            feedback = feedback.filter(status=status)
        if feedback_type:
            feedback = feedback.filter(feedback_type=feedback_type)
        return feedback

    @staticmethod
    def stats() -> Dict[str, Any]:
        by_status = dict(
            Feedback.objects.values_list("status").annotate(n=Count("id")).order_by()
        )
        by_type = dict(
            Feedback.objects.values_list("feedback_type")
            .annotate(n=Count("id"))
            .order_by()
        )
        return {
            "total": sum(by_status.values()),
            "new": by_status.get(FeedbackStatus.NEW, 0),
            "in_review": by_status.get(FeedbackStatus.IN_REVIEW, 0),
            "in_progress": by_status.get(FeedbackStatus.IN_PROGRESS, 0),
            "resolved": by_status.get(FeedbackStatus.RESOLVED, 0),
            "closed": by_status.get(FeedbackStatus.CLOSED, 0),
            "by_type": by_type,
        }

    @staticmethod
    def respond(admin, feedback_id, data: Dict[str, Any]) -> Feedback:
        feedback = get_object_or_404(Feedback, id=feedback_id)

        if "status" in data:
            feedback.status = data["status"]
        if "priority" in data:
            feedback.priority = data["priority"]
        if (data.get("admin_response") or "").strip():
            feedback.admin_response = data["admin_response"].strip()
            feedback.responded_at = timezone.now()
            feedback.responded_by = admin

        feedback.save()
        logger.info(f"{admin.email} updated feedback {feedback.id} to {feedback.status}")
        return feedback
