from django.contrib import admin

from apps.workflow.models import AppError


@admin.register(AppError)
class AppErrorAdmin(admin.ModelAdmin):
    list_display = ("timestamp", "message", "path")
    search_fields = ("message", "path")
    readonly_fields = ("id", "timestamp", "message", "data", "path")
    ordering = ("-timestamp",)
