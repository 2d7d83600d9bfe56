from rest_framework import serializers

from apps.companies.models import Company, CompanyMembership, InvitationCode


class CompanySerializer(serializers.ModelSerializer):
    email = serializers.EmailField(source="account.email", read_only=True)

    class Meta:
        model = Company
        fields = [
            "id",
            "email",
            "name",
            "address",
            "pincode",
            "registration_type",
            "registration_number",
            "size",
            "establishment_year",
            "industry",
            "website",
            "description",
            "verification_status",
            "verification_notes",
            "rejection_reason",
            "verified_at",
            "is_active",
            "created_at",
        ]
        read_only_fields = fields


class CompanyMembershipSerializer(serializers.ModelSerializer):
    company_name = serializers.CharField(source="company.name", read_only=True)
    employee_name = serializers.SerializerMethodField()
    employee_email = serializers.EmailField(source="employee.email", read_only=True)
    employee_code = serializers.CharField(source="employee.employee_code", read_only=True)
    manager_name = serializers.SerializerMethodField()

    def get_employee_name(self, obj):
        return obj.employee.get_full_name()

    def get_manager_name(self, obj):
        if obj.manager_id is None:
            return None
        return obj.manager.employee.get_full_name()

    class Meta:
        model = CompanyMembership
        fields = [
            "id",
            "company",
            "company_name",
            "employee",
            "employee_name",
            "employee_email",
            "employee_code",
            "role",
            "position",
            "manager",
            "manager_name",
            "status",
            "joined_at",
            "left_at",
        ]
        read_only_fields = fields


class InvitationCodeSerializer(serializers.ModelSerializer):
    class Meta:
        model = InvitationCode
        fields = ["code", "expires_at"]
        read_only_fields = fields


class AssignManagerSerializer(serializers.Serializer):
    membership_id = serializers.UUIDField()
    role = serializers.CharField()


class AssignReportsSerializer(serializers.Serializer):
    manager_membership_id = serializers.UUIDField()
    membership_ids = serializers.ListField(child=serializers.UUIDField(), allow_empty=False)
