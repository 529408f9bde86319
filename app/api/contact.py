from fastapi import APIRouter, BackgroundTasks, Body, Depends

from app.api.dependencies import get_contact_service
from app.core.config import settings
from app.models.api_models import ContactRequest, MessageResponse, ErrorResponse
from app.services.contact_service import ContactService
from app.services.notification_service import notify_contact_message

router = APIRouter()

@router.post("/contact", response_model=MessageResponse, responses={400: {"model": ErrorResponse}})
async def submit_contact(
    background_tasks: BackgroundTasks,
    req: ContactRequest = Body(default_factory=ContactRequest),
    service: ContactService = Depends(get_contact_service)
):
    contact = service.submit(req)

    if settings.CONTACT_NOTIFY_EMAIL:
        background_tasks.add_task(notify_contact_message, contact)

    return MessageResponse(message="Your message has been received successfully. Thank you!")
