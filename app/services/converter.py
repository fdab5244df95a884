"""
Converter service for person records.

Sits between the HTTP routes and the pure mappers.
"""
import time

import structlog

from app.mappers import transform
from app.models.schemas import PersonInput, PersonOutput


class ConverterService:
    """Converts request person records into response person records."""

    def __init__(self) -> None:
        """Initialize Converter Service."""
        self.logger = structlog.get_logger(__name__, component="converter_service")

    def convert(self, person: PersonInput) -> PersonOutput:
        """
        Convert a person record to the response shape.

        Args:
            person: Decoded request record

        Returns:
            PersonOutput with renamed address fields
        """
        start_time = time.time()
        self.logger.info("conversion_started", address_count=len(person.addresses))

        result = transform(person)

        execution_time = time.time() - start_time

        self.logger.info(
            "conversion_complete",
            address_count=len(result.addresses),
            execution_time=execution_time,
        )

        return result
