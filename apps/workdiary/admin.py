from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from apps.workdiary.models import WorkEntry, WorkEntryEvent


class WorkEntryEventInline(admin.TabularInline):
    model = WorkEntryEvent
    extra = 0
    readonly_fields = ("event_type", "from_status", "to_status", "actor", "note", "timestamp")
    can_delete = False


@admin.register(WorkEntry)
class WorkEntryAdmin(SimpleHistoryAdmin):
    list_display = ("title", "employee", "company", "start_date", "hours", "status")
    list_filter = ("status", "priority", "billable")
    search_fields = ("title", "employee__email", "company__name")
    raw_id_fields = ("employee", "company", "reviewed_by")
    inlines = [WorkEntryEventInline]
