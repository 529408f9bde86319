import pytest
from pydantic import ValidationError
from app.models.api_models import CartAddRequest, AppointmentBookRequest, ContactRequest
from app.services.validation import RecordValidationError, RequestValidator
from app.services.cart_service import CART_VALIDATOR
from app.services.appointment_service import APPOINTMENT_VALIDATOR
from app.services.contact_service import CONTACT_VALIDATOR

def test_numeric_fields_are_coerced():
    data = CART_VALIDATOR.validate(CartAddRequest(name="Aspirin", price="5.50", quantity="2"))

    assert data["price"] == 5.5
    assert isinstance(data["price"], float)
    assert data["quantity"] == 2
    assert isinstance(data["quantity"], int)
    assert data["image"] is None

def test_malformed_numeric_is_rejected():
    with pytest.raises(ValidationError):
        CartAddRequest(name="Aspirin", price="abc", quantity=1)
    with pytest.raises(ValidationError):
        CartAddRequest(name="Aspirin", price=1, quantity="two")

def test_zero_counts_as_present():
    req = CartAddRequest(name="Free sample", price=0, quantity=0)
    assert CART_VALIDATOR.missing_fields(req) == []

def test_missing_fields_reported_in_order():
    req = AppointmentBookRequest(name="Dr Who", time="")

    with pytest.raises(RecordValidationError) as exc_info:
        APPOINTMENT_VALIDATOR.validate(req)

    assert exc_info.value.missing == ["type", "date", "time"]
    assert exc_info.value.message == "Missing required appointment details (type, name, date, time)."

def test_optional_fields_not_required():
    req = ContactRequest(fullname="A", email="a@b.com", phone="123", message="hi")
    data = CONTACT_VALIDATOR.validate(req)

    assert data["countryCode"] is None

def test_custom_validator():
    validator = RequestValidator(["email"], "Email is required.")

    assert validator.missing_fields(ContactRequest()) == ["email"]
    with pytest.raises(RecordValidationError, match="Email is required."):
        validator.validate(ContactRequest(email=""))
