"""Application services."""
from app.services.converter import ConverterService

__all__ = ["ConverterService"]
