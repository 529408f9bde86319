from typing import List

from app.core.logger import logger
from app.models.api_models import CartAddRequest
from app.models.store_models import CartItem
from app.services.store import ResourceStore
from app.services.validation import RequestValidator

CART_VALIDATOR = RequestValidator(
    ("name", "price", "quantity"),
    "Missing required fields: name, price, or quantity.",
)

def increment_quantity(existing: CartItem, incoming: CartItem) -> CartItem:
    # Price and image of the first add are kept
    return existing.model_copy(update={"quantity": existing.quantity + incoming.quantity})

class CartService:
    def __init__(self, store: ResourceStore[CartItem]):
        self.store = store

    def add_item(self, req: CartAddRequest) -> List[CartItem]:
        """
        Adds an item to the cart, or bumps the quantity of the item with the
        same name. Returns the whole cart.
        """
        data = CART_VALIDATOR.validate(req)
        item = CartItem(**data)

        stored, inserted = self.store.upsert_by_key(item.name, item, increment_quantity)

        if inserted:
            logger.info(f"🛒 Added '{stored.name}' to cart (qty {stored.quantity})")
        else:
            logger.info(f"🛒 Updated quantity for '{stored.name}' -> {stored.quantity}")

        return self.store.list()

    def list_items(self) -> List[CartItem]:
        return self.store.list()
