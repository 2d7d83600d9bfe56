from rest_framework import serializers

from apps.workdiary.models import WorkEntry, WorkEntryEvent


class WorkEntrySerializer(serializers.ModelSerializer):
    company_name = serializers.CharField(source="company.name", read_only=True)
    employee_name = serializers.SerializerMethodField()
    employee_code = serializers.CharField(source="employee.employee_code", read_only=True)
    reviewed_by_name = serializers.SerializerMethodField()
    is_locked = serializers.BooleanField(read_only=True)
    hours = serializers.DecimalField(
        max_digits=6, decimal_places=2, coerce_to_string=False, read_only=True
    )

    def get_employee_name(self, obj):
        return obj.employee.get_full_name()

    def get_reviewed_by_name(self, obj):
        return obj.reviewed_by.get_full_name() if obj.reviewed_by_id else None

    class Meta:
        model = WorkEntry
        fields = [
            "id",
            "employee",
            "employee_name",
            "employee_code",
            "company",
            "company_name",
            "title",
            "description",
            "start_date",
            "end_date",
            "priority",
            "hours",
            "billable",
            "status",
            "is_locked",
            "company_feedback",
            "rating",
            "reviewed_by",
            "reviewed_by_name",
            "reviewed_at",
            "approved_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class WorkEntryEventSerializer(serializers.ModelSerializer):
    actor_name = serializers.SerializerMethodField()

    def get_actor_name(self, obj):
        return obj.actor.get_full_name() if obj.actor_id else "System"

    class Meta:
        model = WorkEntryEvent
        fields = [
            "id",
            "event_type",
            "from_status",
            "to_status",
            "note",
            "actor",
            "actor_name",
            "timestamp",
        ]
        read_only_fields = fields


class ReviewSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False, allow_null=True)
    feedback = serializers.CharField(required=False, allow_blank=True)
