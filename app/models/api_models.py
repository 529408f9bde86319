from pydantic import BaseModel, Field
from typing import Optional, List

from app.models.store_models import CartItem, Appointment

# --- Incoming Request Models ---
# Every field is optional here: presence is checked by RequestValidator so a
# missing field yields the endpoint's own 400 message instead of a 422.

class CartAddRequest(BaseModel):
    name: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    image: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)

class AppointmentBookRequest(BaseModel):
    type: Optional[str] = None
    name: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    notes: Optional[str] = None

class ContactRequest(BaseModel):
    fullname: Optional[str] = None
    email: Optional[str] = None
    countryCode: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None


# --- Outgoing Response Models ---

class CartAddResponse(BaseModel):
    message: str
    cart: List[CartItem]

class AppointmentBookResponse(BaseModel):
    message: str
    appointment: Appointment

class MessageResponse(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: str
