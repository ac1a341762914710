"""
Order Payload Validation

Checks raw creation and update payloads against the OrderDraft and
OrderPatch models before they reach the order store, so the store
never has to re-validate. Validation never raises for bad input and
never mutates it: every call returns a ValidationResult carrying
either the built draft/patch or a structured reason for the rejection.

Rules (declared on the models):
    - customerName: string, non-empty after trimming
    - contents: non-empty list of {itemName, quantity}
    - itemName: string, non-empty after trimming
    - quantity: integer strictly greater than zero
    - status (updates only): one of RECEIVED, DELIVERING, DELIVERED, CANCELED

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from awesome_pizza.models import OrderDraft, OrderPatch, OrderStatus
from awesome_pizza.services.orders.base import OrderErrorKind

logger = logging.getLogger(__name__)


class ValidationReason(str, Enum):
    """Why a payload was rejected."""
    MISSING_NAME = "missing_name"
    MISSING_CONTENTS = "missing_contents"
    INVALID_ITEM_NAME = "invalid_item_name"
    INVALID_ITEM_QUANTITY = "invalid_item_quantity"
    INVALID_STATUS = "invalid_status"


VALID_STATUSES = [s.value for s in OrderStatus]

ERROR_MESSAGES = {
    ValidationReason.MISSING_NAME: "Customer name is required and must be a non-empty string",
    ValidationReason.MISSING_CONTENTS: "Order contents are required and must be a non-empty array",
    ValidationReason.INVALID_ITEM_NAME: "Each order item must have a valid name",
    ValidationReason.INVALID_ITEM_QUANTITY: "Each order item must have a valid quantity (positive integer)",
    ValidationReason.INVALID_STATUS: f"Status must be one of: {', '.join(VALID_STATUSES)}",
}

# Error locations may carry the wire alias or the attribute name
FIELD_REASONS = {
    "customerName": ValidationReason.MISSING_NAME,
    "customer_name": ValidationReason.MISSING_NAME,
    "status": ValidationReason.INVALID_STATUS,
    "contents": ValidationReason.MISSING_CONTENTS,
}
ITEM_QUANTITY_FIELDS = {"quantity"}


@dataclass
class ValidationResult:
    """
    Outcome of validating a creation or update payload.

    Attributes:
        is_valid: Whether the payload passed every check
        draft: Built OrderDraft (creation payloads only)
        patch: Built OrderPatch (update payloads only)
        reason: Machine-readable rejection reason
        error_kind: Always VALIDATION on rejection
        error_message: Human-readable rejection message
    """
    is_valid: bool
    draft: Optional[OrderDraft] = None
    patch: Optional[OrderPatch] = None
    reason: Optional[ValidationReason] = None
    error_kind: Optional[OrderErrorKind] = None
    error_message: Optional[str] = None

    @classmethod
    def rejected(cls, reason: ValidationReason) -> "ValidationResult":
        return cls(
            is_valid=False,
            reason=reason,
            error_kind=OrderErrorKind.VALIDATION,
            error_message=ERROR_MESSAGES[reason],
        )


def reason_for(error: ValidationError) -> ValidationReason:
    """
    Map the first pydantic error to a rejection reason.

    Fields are declared in check order (name, status, contents), so the
    first error is the first failing rule.
    """
    loc = error.errors()[0]["loc"]
    if not loc:
        # The payload itself is not an object: nothing named the customer
        return ValidationReason.MISSING_NAME

    reason = FIELD_REASONS.get(loc[0], ValidationReason.MISSING_NAME)
    if reason == ValidationReason.MISSING_CONTENTS and len(loc) > 1:
        # contents.<index>[.<field>]
        if len(loc) > 2 and loc[2] in ITEM_QUANTITY_FIELDS:
            return ValidationReason.INVALID_ITEM_QUANTITY
        return ValidationReason.INVALID_ITEM_NAME
    return reason


class OrderValidator:
    """
    Validates order payloads against the order data model.

    Example:
        >>> validator = OrderValidator()
        >>> result = validator.validate_creation({
        ...     "customerName": "Mike",
        ...     "contents": [{"itemName": "Quattro Stagioni", "quantity": 3}],
        ... })
        >>> result.is_valid
        True
    """

    def validate_creation(self, payload: Mapping[str, Any]) -> ValidationResult:
        """
        Validate a new-order payload.

        Both customerName and contents are required. Any status or id in
        the payload is ignored: new orders always start as RECEIVED.

        Args:
            payload: Decoded JSON object from the client

        Returns:
            ValidationResult: With ``draft`` set on success
        """
        try:
            draft = OrderDraft.model_validate(payload)
        except ValidationError as e:
            return self._reject(reason_for(e))
        return ValidationResult(is_valid=True, draft=draft)

    def validate_update(self, payload: Mapping[str, Any]) -> ValidationResult:
        """
        Validate a partial order update.

        Every field is optional, but a present field (null included)
        must pass the same checks as on creation. An ``id`` in the
        payload is ignored.

        Args:
            payload: Decoded JSON object from the client

        Returns:
            ValidationResult: With ``patch`` set on success
        """
        try:
            patch = OrderPatch.model_validate(payload)
        except ValidationError as e:
            return self._reject(reason_for(e))
        return ValidationResult(is_valid=True, patch=patch)

    @staticmethod
    def _reject(reason: ValidationReason) -> ValidationResult:
        logger.debug(f"Payload rejected: {reason.value}")
        return ValidationResult.rejected(reason)


def get_order_validator() -> OrderValidator:
    """Get an order validator. The validator is stateless."""
    return OrderValidator()
