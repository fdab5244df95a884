"""Pydantic models for the Person Converter service."""
from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _reject_bool(value: Any) -> Any:
    # JSON true/false would otherwise coerce to 1/0
    if isinstance(value, bool):
        raise ValueError("boolean is not a valid integer")
    return value


WireInt = Annotated[int, BeforeValidator(_reject_bool)]


# Request/Response models
class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    timestamp: datetime
    environment: str


# Person input models
# Request records only decode from the Portuguese wire names.
class AddressInput(BaseModel):
    """Address as received in the request body."""
    street: str = Field(..., alias="rua", description="Street name")
    number: WireInt = Field(..., alias="numero", description="Street number")
    city: str = Field(..., alias="cidade", description="City")


class PersonInput(BaseModel):
    """Person record as received in the request body."""
    name: str = Field(..., alias="nome", description="Full name")
    age: WireInt = Field(..., alias="idade", description="Age in years")
    addresses: list[AddressInput] = Field(..., alias="enderecos")


# Person output models
class OutputSchema(BaseModel):
    """Base schema for response records, built by attribute name."""

    model_config = ConfigDict(populate_by_name=True)


class AddressOutput(OutputSchema):
    """Address as returned in the response body."""
    street_label: str = Field(..., alias="logradouro", description="Street name")
    number: str = Field(..., alias="numero", description="Street number as text")
    city: str = Field(..., alias="cidade", description="City")


class PersonOutput(OutputSchema):
    """Person record as returned in the response body."""
    name: str = Field(..., alias="nome")
    age: int = Field(..., alias="idade")
    addresses: list[AddressOutput] = Field(default_factory=list, alias="enderecos")
