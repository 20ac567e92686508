from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List

from .models import Product

# Request and response bodies for the write-side endpoints. Strings are
# stripped before validation so "   " counts as missing.

class _Body(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True, populate_by_name=True)

class NewsletterIn(_Body):
    email: str = Field(..., min_length=1)

class ContactIn(_Body):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)

class CartAddIn(_Body):
    product_id: str = Field(..., min_length=1, alias="productId")
    quantity: int = Field(1, ge=1)

class Acknowledgement(BaseModel):
    success: bool = True
    message: str

class CartLine(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="productId")
    name: str
    price: int
    quantity: int
    line_total: int = Field(..., alias="lineTotal")

class CartSummary(BaseModel):
    items: List[CartLine]
    total: int

class CartAddOut(Acknowledgement):
    cart: CartSummary

def _make_cart_line(product: Product, quantity: int) -> CartLine:
    return CartLine(
        product_id=product.id,
        name=product.name,
        price=product.price,
        quantity=quantity,
        line_total=product.price * quantity,
    )

def _product_dict(product: Product) -> Dict[str, Any]:
    # description and stock are optional and left out when unset
    return product.model_dump(exclude_none=True)
