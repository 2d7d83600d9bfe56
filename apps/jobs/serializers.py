from rest_framework import serializers

from apps.jobs.enums import (
    ApplicationStatus,
    EmploymentType,
    ExperienceLevel,
    RemoteType,
)
from apps.jobs.models import (
    JobAlert,
    JobApplication,
    JobListing,
    PipelineCandidate,
    SavedJob,
)


class JobListingSerializer(serializers.ModelSerializer):
    company_name = serializers.CharField(source="company.name", read_only=True)
    company_verified = serializers.BooleanField(source="company.is_verified", read_only=True)
    skills = serializers.ListField(child=serializers.CharField(), required=False)

    def validate(self, attrs):
        attrs = super().validate(attrs)
        salary_min = attrs.get("salary_min", getattr(self.instance, "salary_min", None))
        salary_max = attrs.get("salary_max", getattr(self.instance, "salary_max", None))
        if salary_min is not None and salary_max is not None and salary_min > salary_max:
            raise serializers.ValidationError(
                {"salary_max": "Maximum salary must be greater than or equal to minimum salary"}
            )
        return attrs

    class Meta:
        model = JobListing
        fields = [
            "id",
            "company",
            "company_name",
            "company_verified",
            "title",
            "description",
            "requirements",
            "location",
            "employment_type",
            "experience_level",
            "remote_type",
            "salary_min",
            "salary_max",
            "salary_currency",
            "skills",
            "application_deadline",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "company", "created_at", "updated_at"]


class JobApplicationSerializer(serializers.ModelSerializer):
    job_title = serializers.CharField(source="job.title", read_only=True)
    company_name = serializers.CharField(source="job.company.name", read_only=True)
    employee_name = serializers.SerializerMethodField()
    employee_email = serializers.EmailField(source="employee.email", read_only=True)

    def get_employee_name(self, obj):
        return obj.employee.get_full_name()

    class Meta:
        model = JobApplication
        fields = [
            "id",
            "job",
            "job_title",
            "company_name",
            "employee",
            "employee_name",
            "employee_email",
            "cover_letter",
            "include_profile",
            "include_work_diary",
            "status",
            "company_notes",
            "interview_notes",
            "rejection_reason",
            "applied_at",
            "updated_at",
        ]
        read_only_fields = fields


class ApplicantApplicationSerializer(JobApplicationSerializer):
    """Applicant's own view: company notes stay internal."""

    class Meta(JobApplicationSerializer.Meta):
        fields = [
            field
            for field in JobApplicationSerializer.Meta.fields
            if field not in ("company_notes", "interview_notes")
        ]
        read_only_fields = fields


class ApplySerializer(serializers.Serializer):
    cover_letter = serializers.CharField(required=False, allow_blank=True, default="")
    include_profile = serializers.BooleanField(required=False, default=True)
    include_work_diary = serializers.BooleanField(required=False, default=False)


class ApplicationUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=ApplicationStatus.choices, required=False)
    company_notes = serializers.CharField(required=False, allow_blank=True)
    interview_notes = serializers.CharField(required=False, allow_blank=True)
    rejection_reason = serializers.CharField(required=False, allow_blank=True)


class SavedJobSerializer(serializers.ModelSerializer):
    job = JobListingSerializer(read_only=True)

    class Meta:
        model = SavedJob
        fields = ["id", "job", "notes", "saved_at"]
        read_only_fields = fields


class JobAlertSerializer(serializers.ModelSerializer):
    employment_types = serializers.ListField(
        child=serializers.ChoiceField(choices=EmploymentType.choices), required=False
    )
    experience_levels = serializers.ListField(
        child=serializers.ChoiceField(choices=ExperienceLevel.choices), required=False
    )
    remote_types = serializers.ListField(
        child=serializers.ChoiceField(choices=RemoteType.choices), required=False
    )

    class Meta:
        model = JobAlert
        fields = [
            "id",
            "name",
            "keywords",
            "location",
            "employment_types",
            "experience_levels",
            "remote_types",
            "salary_min",
            "frequency",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class PipelineCandidateSerializer(serializers.ModelSerializer):
    employee_name = serializers.SerializerMethodField()
    employee_email = serializers.EmailField(source="employee.email", read_only=True)
    employee_code = serializers.CharField(source="employee.employee_code", read_only=True)
    job_title = serializers.CharField(source="job.title", read_only=True)

    def get_employee_name(self, obj):
        return obj.employee.get_full_name()

    class Meta:
        model = PipelineCandidate
        fields = [
            "id",
            "job",
            "job_title",
            "employee",
            "employee_name",
            "employee_email",
            "employee_code",
            "stage",
            "notes",
            "added_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
