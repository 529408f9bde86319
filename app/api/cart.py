from typing import List
from fastapi import APIRouter, Body, Depends

from app.api.dependencies import get_cart_service
from app.models.api_models import CartAddRequest, CartAddResponse, ErrorResponse
from app.models.store_models import CartItem
from app.services.cart_service import CartService

router = APIRouter()

@router.post("/cart/add", response_model=CartAddResponse, responses={400: {"model": ErrorResponse}})
async def add_to_cart(
    req: CartAddRequest = Body(default_factory=CartAddRequest),
    service: CartService = Depends(get_cart_service)
):
    cart = service.add_item(req)
    return CartAddResponse(message="Item added to cart successfully.", cart=cart)

@router.get("/cart", response_model=List[CartItem])
async def get_cart(service: CartService = Depends(get_cart_service)):
    return service.list_items()
