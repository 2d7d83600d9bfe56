from django.db import models


class FeedbackType(models.TextChoices):
    BUG_REPORT = "bug_report", "Bug Report"
    FEATURE_REQUEST = "feature_request", "Feature Request"
    GENERAL = "general", "General Feedback"
    COMPLAINT = "complaint", "Complaint"
    COMPLIMENT = "compliment", "Compliment"


class FeedbackCategory(models.TextChoices):
    UI_UX = "ui_ux", "UI/UX"
    PERFORMANCE = "performance", "Performance"
    FUNCTIONALITY = "functionality", "Functionality"
    CONTENT = "content", "Content"
    SECURITY = "security", "Security"
    OTHER = "other", "Other"


class FeedbackPriority(models.TextChoices):
    LOW = "low", "Low"
    MEDIUM = "medium", "Medium"
    HIGH = "high", "High"
    URGENT = "urgent", "Urgent"


class FeedbackStatus(models.TextChoices):
    NEW = "new", "New"
    IN_REVIEW = "in_review", "In Review"
    IN_PROGRESS = "in_progress", "In Progress"
    RESOLVED = "resolved", "Resolved"
    CLOSED = "closed", "Closed"
    REJECTED = "rejected", "Rejected"
