from .base import BaseRestView

__all__ = ["BaseRestView"]
