"""Mappers from request records to response records."""
from app.mappers.address import (
    revert_address,
    revert_addresses,
    transform_address,
    transform_addresses,
)
from app.mappers.person import transform

__all__ = [
    "revert_address",
    "revert_addresses",
    "transform",
    "transform_address",
    "transform_addresses",
]
