"""
Address mapping between request and response shapes.

Request field  -> response field
    rua        -> logradouro
    numero     -> numero (integer rendered as base-10 text)
    cidade     -> cidade
"""
from collections.abc import Iterable

from app.models.schemas import AddressInput, AddressOutput


def transform_address(address: AddressInput) -> AddressOutput:
    """Map a request address to its response shape."""
    return AddressOutput(
        street_label=address.street,
        number=str(address.number),
        city=address.city,
    )


def transform_addresses(addresses: Iterable[AddressInput]) -> list[AddressOutput]:
    """Map request addresses one-to-one, keeping their order."""
    return [transform_address(address) for address in addresses]


def revert_address(address: AddressOutput) -> AddressInput:
    """
    Map a response address back to its request shape.

    Raises:
        ValueError: if ``number`` is not made of ASCII digits only
    """
    if not (address.number.isascii() and address.number.isdigit()):
        raise ValueError(f"Street number is not decimal text: {address.number!r}")

    return AddressInput(
        rua=address.street_label,
        numero=int(address.number),
        cidade=address.city,
    )


def revert_addresses(addresses: Iterable[AddressOutput]) -> list[AddressInput]:
    """Inverse of :func:`transform_addresses`."""
    return [revert_address(address) for address in addresses]
