import traceback

from apps.workflow.models import AppError


def persist_app_error(exc: Exception, path: str = ""):
    """Create and save a generic ``AppError`` instance."""
    return AppError.objects.create(
        message=str(exc) or exc.__class__.__name__,
        data={"type": exc.__class__.__name__, "trace": traceback.format_exc()},
        path=path[:255],
    )
