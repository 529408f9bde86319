from typing import List
from fastapi import APIRouter, Body, Depends

from app.api.dependencies import get_appointment_service
from app.models.api_models import AppointmentBookRequest, AppointmentBookResponse, ErrorResponse
from app.models.store_models import Appointment
from app.services.appointment_service import AppointmentService

router = APIRouter()

@router.post(
    "/appointments/book",
    response_model=AppointmentBookResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}}
)
async def book_appointment(
    req: AppointmentBookRequest = Body(default_factory=AppointmentBookRequest),
    service: AppointmentService = Depends(get_appointment_service)
):
    appointment = service.book(req)
    return AppointmentBookResponse(message="Appointment booked successfully.", appointment=appointment)

@router.get("/appointments", response_model=List[Appointment])
async def list_appointments(service: AppointmentService = Depends(get_appointment_service)):
    # No per-user filtering: every stored appointment is returned
    return service.list_appointments()
