from django.contrib.auth import authenticate
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from apps.accounts.models import Account

PROFESSIONAL_FIELDS = [
    "headline",
    "summary",
    "current_position",
    "industry",
    "skills",
    "languages",
    "website",
    "portfolio_url",
    "github_url",
    "linkedin_url",
]

PRIVATE_FIELDS = ["phone", "country_code", "address", "date_of_birth"]


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Custom serializer that accepts username and maps it to email
    """

    username_field = "username"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if "username" not in self.fields:
            self.fields["username"] = serializers.CharField()

    def validate(self, attrs):
        username = attrs.get("username")
        password = attrs.get("password")

        if username and password:
            # Account.USERNAME_FIELD is email
            user = authenticate(
                request=self.context.get("request"),
                username=username.lower(),
                password=password,
            )

            if user and user.is_active:
                self.user = user
                refresh = self.get_token(user)
                return {"refresh": str(refresh), "access": str(refresh.access_token)}

        raise serializers.ValidationError("Invalid credentials")

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["account_type"] = user.account_type
        return token


class AccountSerializer(serializers.ModelSerializer):
    """Full view of an account, returned to the account holder only."""

    full_name = serializers.SerializerMethodField()

    def get_full_name(self, obj):
        return obj.get_full_name()

    class Meta:
        model = Account
        fields = [
            "id",
            "email",
            "first_name",
            "last_name",
            "full_name",
            "account_type",
            "employee_code",
            "is_active",
            "password_needs_reset",
            "date_joined",
            *PRIVATE_FIELDS,
            *PROFESSIONAL_FIELDS,
        ]
        read_only_fields = fields


class EmployeePublicSerializer(serializers.ModelSerializer):
    """What a company is allowed to see about an employee."""

    full_name = serializers.SerializerMethodField()

    def get_full_name(self, obj):
        return obj.get_full_name()

    class Meta:
        model = Account
        fields = [
            "id",
            "email",
            "first_name",
            "last_name",
            "full_name",
            "employee_code",
            *PROFESSIONAL_FIELDS,
        ]
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.ModelSerializer):
    skills = serializers.ListField(child=serializers.CharField(), required=False)
    languages = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta:
        model = Account
        fields = [
            "first_name",
            "last_name",
            *PRIVATE_FIELDS,
            *PROFESSIONAL_FIELDS,
        ]


class ChangePasswordSerializer(serializers.Serializer):
    old_password = serializers.CharField(write_only=True)
    new_password = serializers.CharField(write_only=True)
