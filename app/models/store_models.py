from typing import Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field

# Records kept by the in-memory stores. Field names are the JSON names the
# front end reads, hence the camelCase.

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

class CartItem(BaseModel):
    name: str
    price: float = Field(ge=0, allow_inf_nan=False)
    image: Optional[str] = None
    quantity: int = Field(ge=0)

class Appointment(BaseModel):
    id: int
    type: str  # Doctor, Nutritionist, Trainer, ...
    name: str
    date: str
    time: str
    notes: str = ""
    bookedAt: datetime = Field(default_factory=utc_now)

class ContactMessage(BaseModel):
    id: int
    fullname: str
    email: str
    countryCode: Optional[str] = None
    phone: str
    message: str
    receivedAt: datetime = Field(default_factory=utc_now)
