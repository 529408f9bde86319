from app.core.logger import logger
from app.models.api_models import ContactRequest
from app.models.store_models import ContactMessage
from app.services.store import ResourceStore
from app.services.validation import RequestValidator

CONTACT_VALIDATOR = RequestValidator(
    ("fullname", "email", "phone", "message"),
    "Missing required contact form fields (Full Name, Email, Phone, Message).",
)

class ContactService:
    def __init__(self, store: ResourceStore[ContactMessage]):
        self.store = store

    def submit(self, req: ContactRequest) -> ContactMessage:
        data = CONTACT_VALIDATOR.validate(req)

        contact = ContactMessage(id=self.store.next_id(), **data)
        self.store.append(contact)

        logger.info(f"✉️ Contact message #{contact.id} received from {contact.fullname} <{contact.email}>")
        return contact
