import logging

from rest_framework import status
from rest_framework.exceptions import MethodNotAllowed
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.accounts.permissions import IsCompanyMember, IsEmployee
from apps.accounts.serializers import AccountSerializer
from apps.companies.views.mixins import CompanyContextMixin
from apps.profiles.services.profile_service import ProfileService
from apps.workflow.views import BaseRestView

logger = logging.getLogger(__name__)

# Sections that can only be added or removed, never edited
APPEND_ONLY_SECTIONS = {"endorsement"}


class EmployeeProfileView(BaseRestView):
    permission_classes = [IsAuthenticated]

    def get(self, request, employee_id):
        try:
            return Response(ProfileService.get_profile(request.user, employee_id))
        except Exception as e:
            return self.handle_service_error(e)


class OwnProfileView(BaseRestView):
    permission_classes = [IsEmployee]

    def get(self, request):
        return Response(
            {
                "employee": AccountSerializer(request.user).data,
                **ProfileService.sections(request.user),
            }
        )

    def patch(self, request):
        try:
            account = ProfileService.update_own_profile(request.user, request.data)
            return Response(AccountSerializer(account).data)
        except Exception as e:
            return self.handle_service_error(e)


class ProfileItemCreateView(BaseRestView):
    permission_classes = [IsEmployee]

    def post(self, request, kind):
        try:
            item = ProfileService.create_item(request.user, kind, request.data)
            return Response(
                ProfileService.serialize_item(kind, item),
                status=status.HTTP_201_CREATED,
            )
        except Exception as e:
            return self.handle_service_error(e)


class ProfileItemDetailView(BaseRestView):
    permission_classes = [IsEmployee]

    def patch(self, request, kind, item_id):
        if kind in APPEND_ONLY_SECTIONS:
            raise MethodNotAllowed(request.method)
        try:
            item = ProfileService.update_item(request.user, kind, item_id, request.data)
            return Response(ProfileService.serialize_item(kind, item))
        except Exception as e:
            return self.handle_service_error(e)

    def put(self, request, kind, item_id):
        return self.patch(request, kind, item_id)

    def delete(self, request, kind, item_id):
        try:
            ProfileService.delete_item(request.user, kind, item_id)
            return Response({"message": f"{kind.capitalize()} deleted"})
        except Exception as e:
            return self.handle_service_error(e)


class CompanyEmployeeProfileView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]

    def get(self, request, employee_id):
        try:
            context = self.get_company_context(request)
            return Response(ProfileService.company_profile(context, employee_id))
        except Exception as e:
            return self.handle_service_error(e)


class CompanyEmployeeSectionView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]
    kind = None

    def get(self, request, employee_id):
        try:
            context = self.get_company_context(request)
            return Response(
                ProfileService.company_section(context, employee_id, self.kind)
            )
        except Exception as e:
            return self.handle_service_error(e)
