from django.contrib import admin

from apps.administration.models import Feedback


@admin.register(Feedback)
class FeedbackAdmin(admin.ModelAdmin):
    list_display = ("title", "feedback_type", "category", "priority", "status", "created_at")
    list_filter = ("feedback_type", "category", "priority", "status")
    search_fields = ("title", "description", "account__email")
    readonly_fields = ("created_at", "updated_at", "responded_at")
