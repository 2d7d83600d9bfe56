from .app_error import AppError

__all__ = ["AppError"]
