from typing import List

from app.core.logger import logger
from app.models.api_models import AppointmentBookRequest
from app.models.store_models import Appointment
from app.services.store import ResourceStore
from app.services.validation import RequestValidator

APPOINTMENT_VALIDATOR = RequestValidator(
    ("type", "name", "date", "time"),
    "Missing required appointment details (type, name, date, time).",
)

class AppointmentService:
    def __init__(self, store: ResourceStore[Appointment]):
        self.store = store

    def book(self, req: AppointmentBookRequest) -> Appointment:
        data = APPOINTMENT_VALIDATOR.validate(req)

        appointment = Appointment(
            id=self.store.next_id(),
            type=data["type"],
            name=data["name"],
            date=data["date"],
            time=data["time"],
            notes=data.get("notes") or "",
        )
        self.store.append(appointment)

        logger.info(
            f"📅 New appointment #{appointment.id}: {appointment.type} {appointment.name} "
            f"on {appointment.date} at {appointment.time}"
        )
        return appointment

    def list_appointments(self) -> List[Appointment]:
        return self.store.list()
