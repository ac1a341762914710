"""
Order Store Abstract Base Class

Defines the interface contract for order store implementations.
Expected failures (unknown order id, id generation exhausted) are
returned as an OrderResult, never raised, so the calling layer can
branch on the result kind.

Author: Khalil Bannouri
Version: 1.0.0
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from awesome_pizza.models import Order, OrderDraft, OrderPatch


class OrderErrorKind(str, Enum):
    """Error taxonomy shared by the validator, the store and the API."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


@dataclass
class OrderResult:
    """
    Standardized result from an order store operation.

    Attributes:
        success: Whether the operation succeeded
        order: Copy of the resulting order on success
        error_kind: Failure category (NOT_FOUND or INTERNAL)
        error_message: Error description if the operation failed
    """
    success: bool
    order: Optional[Order] = None
    error_kind: Optional[OrderErrorKind] = None
    error_message: Optional[str] = None

    @classmethod
    def found(cls, order: Order) -> "OrderResult":
        return cls(success=True, order=order)

    @classmethod
    def not_found(cls, order_id: str) -> "OrderResult":
        return cls(
            success=False,
            error_kind=OrderErrorKind.NOT_FOUND,
            error_message=f"Order with ID '{order_id}' not found",
        )

    @classmethod
    def internal(cls, message: str) -> "OrderResult":
        return cls(success=False, error_kind=OrderErrorKind.INTERNAL, error_message=message)


class BaseOrderStore(ABC):
    """
    Abstract base class for order stores.

    Implementations own their collection and only expose it through
    these operations. Orders handed out are copies: changing them does
    not change the store.

    Example:
        >>> store = get_order_store()
        >>> result = store.add(draft)
        >>> store.find_by_id(result.order.id).success
        True
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """
        Return the name of the store backend.

        Returns:
            str: Backend name (e.g., "memory")
        """
        pass

    @abstractmethod
    def find_by_id(self, order_id: str) -> OrderResult:
        """
        Look up an order by id.

        Args:
            order_id: Order identifier

        Returns:
            OrderResult: The order, or a NOT_FOUND result
        """
        pass

    @abstractmethod
    def add(self, draft: OrderDraft) -> OrderResult:
        """
        Store a new order built from a validated draft.

        Assigns a fresh id and sets the status to RECEIVED.

        Args:
            draft: Validated customer name and contents

        Returns:
            OrderResult: The stored order, or an INTERNAL result if no
            free id could be generated
        """
        pass

    @abstractmethod
    def update(self, order_id: str, patch: OrderPatch) -> OrderResult:
        """
        Overwrite the fields present in the patch.

        Args:
            order_id: Order identifier (never changed)
            patch: Validated partial fields

        Returns:
            OrderResult: The updated order, or a NOT_FOUND result
        """
        pass

    @abstractmethod
    def seed(self, orders: Iterable[Order]) -> int:
        """
        Load pre-built orders, skipping ids already present.

        Returns:
            int: Number of orders added
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored orders."""
        pass

    @abstractmethod
    def health_check(self, timeout: float = 1.0) -> bool:
        """
        Verify the store is operational.

        May block for up to ``timeout`` seconds; call it off the event loop.

        Returns:
            bool: True if the store can serve requests
        """
        pass
