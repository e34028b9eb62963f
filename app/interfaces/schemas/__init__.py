from .base import CamelModel, ErrorResponse

__all__ = ["CamelModel", "ErrorResponse"]
