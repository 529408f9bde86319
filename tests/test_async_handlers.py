import pytest
from app.api.cart import add_to_cart, get_cart
from app.api.appointments import book_appointment
from app.models.api_models import CartAddRequest, AppointmentBookRequest
from app.services.store import build_stores
from app.services.cart_service import CartService
from app.services.appointment_service import AppointmentService
from app.services.validation import RecordValidationError

# Handlers called directly, without the HTTP layer
@pytest.mark.asyncio
async def test_cart_handlers_share_injected_store():
    stores = build_stores()
    service = CartService(stores.cart)

    await add_to_cart(CartAddRequest(name="Aspirin", price=5.5, quantity=2), service)
    res = await add_to_cart(CartAddRequest(name="Aspirin", price=5.5, quantity=2), service)

    assert res.cart[0].quantity == 4
    assert await get_cart(service) == res.cart

@pytest.mark.asyncio
async def test_booking_handler_rejects_without_mutation():
    stores = build_stores()
    service = AppointmentService(stores.appointments)

    with pytest.raises(RecordValidationError):
        await book_appointment(AppointmentBookRequest(type="Doctor", name="Dr A"), service)

    assert len(stores.appointments) == 0
