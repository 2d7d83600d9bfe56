from rest_framework import serializers

from apps.profiles.models import (
    Certification,
    Education,
    Endorsement,
    Experience,
    Project,
)

OWNER_FIELDS = ["id", "employee", "created_at", "updated_at"]


class DateRangeMixin:
    """Rejects an end that precedes the start; partial updates fall back to the instance."""

    start_field = "start_date"
    end_field = "end_date"

    def validate(self, attrs):
        attrs = super().validate(attrs)
        start = attrs.get(self.start_field, getattr(self.instance, self.start_field, None))
        end = attrs.get(self.end_field, getattr(self.instance, self.end_field, None))
        if start is not None and end is not None and end < start:
            raise serializers.ValidationError(
                {self.end_field: "End date cannot be before start date"}
            )
        return attrs


class ExperienceSerializer(DateRangeMixin, serializers.ModelSerializer):
    def validate(self, attrs):
        attrs = super().validate(attrs)
        if attrs.get("is_current"):
            attrs["end_date"] = None
        return attrs

    class Meta:
        model = Experience
        fields = OWNER_FIELDS + [
            "title",
            "company_name",
            "location",
            "start_date",
            "end_date",
            "is_current",
            "description",
        ]
        read_only_fields = OWNER_FIELDS


class EducationSerializer(DateRangeMixin, serializers.ModelSerializer):
    start_field = "start_year"
    end_field = "end_year"

    class Meta:
        model = Education
        fields = OWNER_FIELDS + [
            "institution",
            "degree",
            "field_of_study",
            "start_year",
            "end_year",
            "grade",
        ]
        read_only_fields = OWNER_FIELDS


class CertificationSerializer(DateRangeMixin, serializers.ModelSerializer):
    start_field = "issue_date"
    end_field = "expiry_date"

    class Meta:
        model = Certification
        fields = OWNER_FIELDS + [
            "name",
            "issuer",
            "issue_date",
            "expiry_date",
            "credential_id",
            "credential_url",
        ]
        read_only_fields = OWNER_FIELDS


class ProjectSerializer(DateRangeMixin, serializers.ModelSerializer):
    technologies = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta:
        model = Project
        fields = OWNER_FIELDS + [
            "name",
            "description",
            "url",
            "start_date",
            "end_date",
            "technologies",
        ]
        read_only_fields = OWNER_FIELDS


class EndorsementSerializer(serializers.ModelSerializer):
    class Meta:
        model = Endorsement
        fields = OWNER_FIELDS + [
            "endorser_name",
            "endorser_email",
            "relationship",
            "message",
        ]
        read_only_fields = OWNER_FIELDS
