"""Person mapping between request and response shapes."""
from app.mappers.address import transform_addresses
from app.models.schemas import PersonInput, PersonOutput


def transform(person: PersonInput) -> PersonOutput:
    """Reshape a person record; name and age are copied unchanged."""
    return PersonOutput(
        name=person.name,
        age=person.age,
        addresses=transform_addresses(person.addresses),
    )
