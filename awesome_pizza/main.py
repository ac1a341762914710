"""
FastAPI Application Entry Point

Awesome Pizza order-taking API over an in-memory order store.

Endpoints:
    - GET /api/daily-menu: Daily menu
    - GET /api/orders/{order_id}: Fetch an order
    - POST /api/orders: Create an order
    - PUT /api/orders/{order_id}: Update an order (status, name, contents)
    - GET /health: System health check

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Optional, Union

from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from awesome_pizza.core.config import get_settings, setup_logging
from awesome_pizza.schemas import (
    ErrorResponse,
    HealthResponse,
    MenuResponse,
    OrderEnvelope,
)
from awesome_pizza.services.catalog import MenuCatalog, get_menu_catalog
from awesome_pizza.services.orders import (
    BaseOrderStore,
    OrderErrorKind,
    OrderResult,
    get_order_store,
)
from awesome_pizza.services.validation import (
    OrderValidator,
    ValidationResult,
    get_order_validator,
)

# Initialize configuration and logging
settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# API ERRORS
# =============================================================================

ERROR_LABELS = {
    400: "Bad request",
    404: "Not found",
    405: "Method not allowed",
    500: "Internal server error",
}

STATUS_CODES = {
    OrderErrorKind.VALIDATION: 400,
    OrderErrorKind.NOT_FOUND: 404,
    OrderErrorKind.INTERNAL: 500,
}


class OrderApiError(Exception):
    """Raised by handlers to answer with an error envelope."""

    def __init__(self, status_code: int, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.reason = reason

    @classmethod
    def from_result(cls, result: Union[ValidationResult, OrderResult]) -> "OrderApiError":
        """Map a failed validator or store result to its HTTP status."""
        reason = getattr(result, "reason", None)
        return cls(
            STATUS_CODES[result.error_kind],
            result.error_message or ERROR_LABELS[STATUS_CODES[result.error_kind]],
            reason.value if reason else None,
        )


def error_response(status_code: int, message: str, reason: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(
        error=ERROR_LABELS.get(status_code, "Error"),
        message=message,
        reason=reason,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    # Startup
    logger.info("=" * 60)
    logger.info(f"🍕 Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info("=" * 60)

    catalog = get_menu_catalog()
    store = get_order_store()
    logger.info(f"✅ Menu: {len(catalog)} entries")
    logger.info(f"✅ Order Store: {store.provider_name} ({store.count()} orders)")

    logger.info("=" * 60)
    logger.info("✅ Application ready!")
    logger.info("=" * 60)

    yield  # Application runs

    # Shutdown
    logger.info("Shutting down, in-memory orders are discarded")


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

app = FastAPI(
    title=settings.app_name,
    description="Order-taking API for a single daily menu.",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins_list,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def require_object(payload: Any) -> dict[str, Any]:
    """Reject request bodies that are not JSON objects."""
    if not isinstance(payload, dict):
        raise OrderApiError(400, "Request body must be a JSON object")
    return payload


# =============================================================================
# ROOT & HEALTH ENDPOINTS
# =============================================================================

@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """API root with navigation links."""
    return {
        "message": f"🍕 Welcome to {settings.app_name}",
        "version": settings.app_version,
        "environment": settings.env_mode.value,
        "documentation": "/docs",
        "menu": "/api/daily-menu",
        "health": "/health",
    }


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="System Health Check",
)
def health_check(
    store: BaseOrderStore = Depends(get_order_store),
    catalog: MenuCatalog = Depends(get_menu_catalog),
) -> HealthResponse:
    """
    Verify the order store is operational.

    Runs in the threadpool since the lock wait blocks. The order count
    is skipped when the store lock cannot be taken.
    """
    healthy = store.health_check()
    if not healthy:
        logger.error("Order store health check failed")

    return HealthResponse(
        status="operational" if healthy else "degraded",
        order_store="healthy" if healthy else "unhealthy",
        orders=store.count() if healthy else None,
        menu_entries=len(catalog),
        environment=settings.env_mode.value,
        timestamp=datetime.now(),
    )


# =============================================================================
# MENU ENDPOINTS
# =============================================================================

@app.get(
    "/api/daily-menu",
    response_model=MenuResponse,
    tags=["Menu"],
    summary="Daily Menu",
)
async def daily_menu(
    catalog: MenuCatalog = Depends(get_menu_catalog),
) -> MenuResponse:
    """Return the daily menu in its fixed order."""
    return MenuResponse(
        data=list(catalog.list_menu()),
        message="Daily menu retrieved successfully",
    )


# =============================================================================
# ORDER API ENDPOINTS
# =============================================================================

@app.get(
    "/api/orders/{order_id}",
    response_model=OrderEnvelope,
    responses={404: {"model": ErrorResponse}},
    tags=["Orders"],
)
async def get_order(
    order_id: str,
    store: BaseOrderStore = Depends(get_order_store),
) -> OrderEnvelope:
    """Get a specific order by ID."""
    result = store.find_by_id(order_id)
    if not result.success:
        raise OrderApiError.from_result(result)

    return OrderEnvelope(data=result.order, message="Order retrieved successfully")


@app.post(
    "/api/orders",
    status_code=201,
    response_model=OrderEnvelope,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["Orders"],
    summary="Create Order",
)
async def create_order(
    payload: Any = Body(...),
    store: BaseOrderStore = Depends(get_order_store),
    validator: OrderValidator = Depends(get_order_validator),
) -> OrderEnvelope:
    """
    Create a new order.

    Body: ``{"customerName": str, "contents": [{"itemName": str, "quantity": int}]}``.
    The new order always starts as RECEIVED.
    """
    validation = validator.validate_creation(require_object(payload))
    if not validation.is_valid:
        logger.info(f"Order creation rejected: {validation.reason.value}")
        raise OrderApiError.from_result(validation)

    logger.info(f"Creating order for: {validation.draft.customer_name}")

    result = store.add(validation.draft)
    if not result.success:
        raise OrderApiError.from_result(result)

    return OrderEnvelope(data=result.order, message="Order created successfully")


@app.put(
    "/api/orders/{order_id}",
    response_model=OrderEnvelope,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    tags=["Orders"],
    summary="Update Order",
)
async def update_order(
    order_id: str,
    payload: Any = Body(...),
    store: BaseOrderStore = Depends(get_order_store),
    validator: OrderValidator = Depends(get_order_validator),
) -> OrderEnvelope:
    """
    Update an existing order.

    Any subset of ``customerName``, ``status`` and ``contents`` may be
    sent; ``contents`` replaces the whole list. Any status may follow
    any other.
    """
    validation = validator.validate_update(require_object(payload))
    if not validation.is_valid:
        logger.info(f"Order {order_id} update rejected: {validation.reason.value}")
        raise OrderApiError.from_result(validation)

    existing = store.find_by_id(order_id)
    if not existing.success:
        raise OrderApiError.from_result(existing)

    result = store.update(order_id, validation.patch)
    if not result.success:
        raise OrderApiError.from_result(result)

    return OrderEnvelope(data=result.order, message="Order updated successfully")


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(OrderApiError)
async def order_api_error_handler(request: Request, exc: OrderApiError) -> JSONResponse:
    """Render handler-raised errors as the error envelope."""
    return error_response(exc.status_code, exc.message, exc.reason)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or missing JSON bodies are client errors."""
    logger.debug(f"Request validation failed: {exc.errors()}")
    return error_response(400, "Request body must be a valid JSON object")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes and methods use the error envelope too."""
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler."""
    logger.exception(f"Unhandled exception: {exc}")

    return error_response(
        500,
        str(exc) if settings.debug else "An unexpected error occurred",
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
