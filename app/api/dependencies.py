from fastapi import Depends, Request

from app.services.store import Stores
from app.services.cart_service import CartService
from app.services.appointment_service import AppointmentService
from app.services.contact_service import ContactService

def get_stores(request: Request) -> Stores:
    return request.app.state.stores

def get_cart_service(stores: Stores = Depends(get_stores)) -> CartService:
    return CartService(stores.cart)

def get_appointment_service(stores: Stores = Depends(get_stores)) -> AppointmentService:
    return AppointmentService(stores.appointments)

def get_contact_service(stores: Stores = Depends(get_stores)) -> ContactService:
    return ContactService(stores.contact_messages)
