"""Person conversion endpoint."""
from fastapi import APIRouter

from app.models.schemas import PersonInput, PersonOutput
from app.services import ConverterService

router = APIRouter()
converter_service = ConverterService()


@router.post("", response_model=PersonOutput)
async def convert_person(request: PersonInput) -> PersonOutput:
    """Return the person record with address fields renamed."""
    return converter_service.convert(request)
