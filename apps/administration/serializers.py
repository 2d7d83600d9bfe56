from rest_framework import serializers

from apps.accounts.models import Account
from apps.administration.enums import FeedbackPriority, FeedbackStatus
from apps.administration.models import Feedback
from apps.companies.enums import VerificationStatus
from apps.companies.serializers import CompanySerializer


class FeedbackSerializer(serializers.ModelSerializer):
    account_email = serializers.EmailField(source="account.email", read_only=True)

    class Meta:
        model = Feedback
        fields = [
            "id",
            "account",
            "account_email",
            "feedback_type",
            "category",
            "title",
            "description",
            "priority",
            "status",
            "page_url",
            "browser_info",
            "rating",
            "admin_response",
            "responded_at",
            "responded_by",
            "created_at",
        ]
        read_only_fields = [
            "id",
            "account",
            "status",
            "admin_response",
            "responded_at",
            "responded_by",
            "created_at",
        ]


class FeedbackUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=FeedbackStatus.choices, required=False)
    admin_response = serializers.CharField(required=False, allow_blank=True)
    priority = serializers.ChoiceField(
        choices=FeedbackPriority.choices, required=False
    )


class AdminEmployeeSerializer(serializers.ModelSerializer):
    full_name = serializers.SerializerMethodField()
    work_entries = serializers.IntegerField(source="work_entry_count", read_only=True)

    def get_full_name(self, obj):
        return obj.get_full_name()

    class Meta:
        model = Account
        fields = [
            "id",
            "email",
            "full_name",
            "employee_code",
            "phone",
            "is_active",
            "date_joined",
            "last_login",
            "work_entries",
        ]
        read_only_fields = fields


class AdminCompanySerializer(CompanySerializer):
    job_count = serializers.IntegerField(read_only=True)
    member_count = serializers.IntegerField(read_only=True)

    class Meta(CompanySerializer.Meta):
        fields = CompanySerializer.Meta.fields + ["job_count", "member_count"]
        read_only_fields = fields


class ToggleStatusSerializer(serializers.Serializer):
    is_active = serializers.BooleanField()


class VerificationReviewSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=[VerificationStatus.VERIFIED, VerificationStatus.REJECTED]
    )
    notes = serializers.CharField(required=False, allow_blank=True, default="")
    rejection_reason = serializers.CharField(required=False, allow_blank=True, default="")

    def validate(self, attrs):
        rejecting = attrs["status"] == VerificationStatus.REJECTED
        if rejecting and not attrs["rejection_reason"].strip():
            raise serializers.ValidationError(
                {"rejection_reason": "Rejection reason is required"}
            )
        return attrs
