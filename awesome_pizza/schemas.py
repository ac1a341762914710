"""
Pydantic Schemas for API Responses

Every endpoint under /api answers with the same JSON envelope:

    {"success": true, "data": ..., "message": "..."}
    {"success": false, "error": "...", "message": "...", "reason": ...}

Request bodies are plain JSON objects checked by OrderValidator.

Author: Khalil Bannouri
Version: 1.0.0
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel

from awesome_pizza.models import MenuEntry, Order


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class ApiResponse(BaseModel):
    """Successful response envelope."""
    success: bool = True
    data: Any = None
    message: str


class MenuResponse(ApiResponse):
    """Daily menu envelope."""
    data: List[MenuEntry]


class OrderEnvelope(ApiResponse):
    """Single order envelope."""
    data: Order


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: str
    message: str
    reason: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    order_store: str
    orders: Optional[int] = None
    menu_entries: int
    environment: str
    timestamp: datetime
