from apps.companies.services.company_service import CompanyService


class CompanyContextMixin:
    """Resolves the company the signed-in account is acting for."""

    def get_company_context(self, request):
        company_id = request.query_params.get("company_id")
        if not company_id and hasattr(request.data, "get"):
            company_id = request.data.get("company_id")
        return CompanyService.get_context(request.user, company_id)
