import logging
from typing import Any, Dict, List, Optional

from .core import (
    NewsletterIn, ContactIn, CartAddIn, CartAddOut, CartSummary,
    _make_cart_line, _product_dict
)
from .database import Catalog, SubscriberRegistry
from .errors import UpstreamFailure, ValidationFailure

# This file contains the core logic for all API endpoints. Routes in
# main.py only resolve the stores and delegate here.

logger = logging.getLogger(__name__)

# Product endpoints
async def list_products_logic(catalog: Catalog, category: Optional[str] = None) -> List[Dict[str, Any]]:
    try:
        return [_product_dict(p) for p in catalog.list_products(category)]
    except Exception as exc:
        logger.exception("Listing products failed (category=%r)", category)
        raise UpstreamFailure("Failed to fetch products") from exc

async def get_product_logic(catalog: Catalog, product_id: str) -> Dict[str, Any]:
    return _product_dict(catalog.get_product(product_id))

async def list_categories_logic(catalog: Catalog) -> List[str]:
    try:
        return catalog.list_categories()
    except Exception as exc:
        logger.exception("Listing categories failed")
        raise UpstreamFailure("Failed to fetch categories") from exc

# Newsletter
async def subscribe_logic(registry: SubscriberRegistry, payload: NewsletterIn) -> Dict[str, Any]:
    added = await registry.add(payload.email)
    if not added:
        raise ValidationFailure("Email already subscribed")
    logger.info("Newsletter subscription: %s (%d total)", payload.email, len(registry))
    return {"success": True, "message": "Successfully subscribed to newsletter"}

# Contact form
async def contact_logic(payload: ContactIn) -> Dict[str, Any]:
    logger.info("Contact form from %s <%s>: %s", payload.name, payload.email, payload.message)
    return {
        "success": True,
        "message": "Thank you for contacting us! We'll get back to you soon.",
    }

# Cart
async def cart_add_logic(catalog: Catalog, payload: CartAddIn) -> Dict[str, Any]:
    product = catalog.get_product(payload.product_id)
    if product.stock is not None and product.stock < payload.quantity:
        raise ValidationFailure("Insufficient stock")

    line = _make_cart_line(product, payload.quantity)
    out = CartAddOut(
        message="Item added to cart",
        cart=CartSummary(items=[line], total=line.line_total),
    )
    logger.info("Cart add: product %d x%d", product.id, payload.quantity)
    return out.model_dump(by_alias=True)

# Health
async def health_logic(catalog: Catalog) -> Dict[str, Any]:
    return {"status": "ok", "products": len(catalog)}
