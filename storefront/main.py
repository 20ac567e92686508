# storefront/main.py
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .core import NewsletterIn, ContactIn, CartAddIn
from .database import Catalog, SubscriberRegistry
from .errors import StoreError, ValidationFailure
from .logging_config import setup_logging
from .logic import (
    list_products_logic, get_product_logic, list_categories_logic,
    subscribe_logic, contact_logic, cart_add_logic, health_logic
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

# ---------------------------
# Per-app stores
# ---------------------------
def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog

def get_subscribers(request: Request) -> SubscriberRegistry:
    return request.app.state.subscribers

# ---------------------------
# Product endpoints
# ---------------------------
@router.get("/products")
async def list_products(category: Optional[str] = None, catalog: Catalog = Depends(get_catalog)) -> List[Dict[str, Any]]:
    return await list_products_logic(catalog, category)

@router.get("/products/{product_id}")
async def get_product(product_id: str, catalog: Catalog = Depends(get_catalog)) -> Dict[str, Any]:
    return await get_product_logic(catalog, product_id)

@router.get("/categories")
async def list_categories(catalog: Catalog = Depends(get_catalog)) -> List[str]:
    return await list_categories_logic(catalog)

# ---------------------------
# Newsletter / contact
# ---------------------------
@router.post("/newsletter/subscribe")
async def newsletter_subscribe(payload: NewsletterIn, registry: SubscriberRegistry = Depends(get_subscribers)):
    return await subscribe_logic(registry, payload)

@router.post("/contact")
async def contact(payload: ContactIn):
    return await contact_logic(payload)

# ---------------------------
# Cart
# ---------------------------
@router.post("/cart/add")
async def cart_add(payload: CartAddIn, catalog: Catalog = Depends(get_catalog)):
    return await cart_add_logic(catalog, payload)

@router.get("/health")
async def health(catalog: Catalog = Depends(get_catalog)):
    return await health_logic(catalog)

# ---------------------------
# Error handlers
# ---------------------------
async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())

def _describe(err: Dict[str, Any]) -> str:
    loc = [str(part) for part in err.get("loc", ()) if part != "body"]
    field = loc[-1] if loc else None
    if field is None:
        return "Request body is required"
    if err.get("type") in ("missing", "string_too_short", "string_type"):
        return f"{field} is required"
    return f"{field}: {err.get('msg', 'invalid value')}"

async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = _describe(errors[0]) if errors else "Invalid request"
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
    failure = ValidationFailure(message)
    return JSONResponse(status_code=failure.status_code, content=failure.to_body())

# ---------------------------
# App factory
# ---------------------------
def create_app(catalog: Optional[Catalog] = None) -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title="jewel-storefront (in-memory catalog)")
    app.state.catalog = catalog if catalog is not None else Catalog.from_seed()
    app.state.subscribers = SubscriberRegistry()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(router)
    return app

app = create_app()
