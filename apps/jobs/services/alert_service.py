import logging
from typing import Any, Dict

from django.shortcuts import get_object_or_404

from apps.jobs.models import JobAlert
from apps.jobs.serializers import JobAlertSerializer

logger = logging.getLogger(__name__)


class JobAlertService:
    @staticmethod
    def list_alerts(employee):
        return JobAlert.objects.filter(employee=employee)

    @staticmethod
    def get_own_alert(employee, alert_id) -> JobAlert:
        alert = get_object_or_404(JobAlert, id=alert_id)
        if alert.employee_id != employee.id:
            raise PermissionError("You can only manage your own job alerts")
        return alert

    @staticmethod
    def create_alert(employee, data: Dict[str, Any]) -> JobAlert:
        serializer = JobAlertSerializer(data=data)
        serializer.is_valid(raise_exception=True)
        alert = serializer.save(employee=employee)
        logger.info(f"{employee.email} created job alert {alert.id}")
        return alert

    @staticmethod
    def update_alert(employee, alert_id, data: Dict[str, Any]) -> JobAlert:
        alert = JobAlertService.get_own_alert(employee, alert_id)
        serializer = JobAlertSerializer(alert, data=data, partial=True)
        serializer.is_valid(raise_exception=True)
        alert = serializer.save()
        logger.info(f"{employee.email} updated job alert {alert.id}")
        return alert

    @staticmethod
    def delete_alert(employee, alert_id) -> None:
        alert = JobAlertService.get_own_alert(employee, alert_id)
        alert.delete()
        logger.info(f"{employee.email} deleted job alert {alert_id}")
