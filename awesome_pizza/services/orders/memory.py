"""
In-Memory Order Store

Holds all orders in a process-local list guarded by a single lock.
Nothing survives a restart.

Behavior:
    - Ids look like ``order-3f9c2a7b1d4e`` (12 hex chars from uuid4)
    - A generated id that is already taken is retried a bounded number
      of times before the add fails with an INTERNAL result
    - Orders are handed out as deep copies

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
import threading
import uuid
from typing import Callable, Iterable, Optional

from awesome_pizza.models import Order, OrderDraft, OrderPatch, OrderStatus
from awesome_pizza.services.orders.base import BaseOrderStore, OrderResult

logger = logging.getLogger(__name__)


def generate_order_id() -> str:
    """Generate a practically-unique order id."""
    return f"order-{uuid.uuid4().hex[:12]}"


class InMemoryOrderStore(BaseOrderStore):
    """
    Thread-safe in-memory order store.

    Attributes:
        max_id_attempts: Ids tried by add() before giving up
        id_factory: Callable returning candidate ids

    Example:
        >>> store = InMemoryOrderStore()
        >>> result = store.add(OrderDraft(
        ...     customer_name="Mike",
        ...     contents=[OrderItem(item_name="Quattro Stagioni", quantity=3)],
        ... ))
        >>> result.order.status
        <OrderStatus.RECEIVED: 'RECEIVED'>
    """

    def __init__(
        self,
        max_id_attempts: int = 5,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """
        Initialize an empty store.

        Args:
            max_id_attempts: Ids tried by add() before giving up (>= 1)
            id_factory: Candidate id generator (default: generate_order_id)
        """
        if max_id_attempts < 1:
            raise ValueError("max_id_attempts must be at least 1")

        self.max_id_attempts = max_id_attempts
        self.id_factory = id_factory or generate_order_id

        self._orders: list[Order] = []
        self._ids: set[str] = set()
        self._lock = threading.Lock()

    @property
    def provider_name(self) -> str:
        return "memory"

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def _find(self, order_id: str) -> Optional[int]:
        """Index of the order with this id. Caller must hold the lock."""
        for index, order in enumerate(self._orders):
            if order.id == order_id:
                return index
        return None

    def find_by_id(self, order_id: str) -> OrderResult:
        with self._lock:
            index = self._find(order_id)
            if index is None:
                logger.debug(f"Order {order_id} not found")
                return OrderResult.not_found(order_id)
            return OrderResult.found(self._orders[index].model_copy(deep=True))

    # =========================================================================
    # MUTATION
    # =========================================================================

    def _next_id(self) -> Optional[str]:
        """Return an unused id, or None if every attempt collided. Caller must hold the lock."""
        for attempt in range(1, self.max_id_attempts + 1):
            candidate = self.id_factory()
            if candidate not in self._ids:
                return candidate
            logger.warning(
                f"Order id collision on {candidate} "
                f"(attempt {attempt}/{self.max_id_attempts})"
            )
        return None

    def add(self, draft: OrderDraft) -> OrderResult:
        with self._lock:
            order_id = self._next_id()
            if order_id is None:
                logger.error(
                    f"Could not generate a free order id after "
                    f"{self.max_id_attempts} attempts"
                )
                return OrderResult.internal("Failed to generate a unique order id")

            order = Order(
                id=order_id,
                customer_name=draft.customer_name,
                status=OrderStatus.RECEIVED,
                contents=[item.model_copy() for item in draft.contents],
            )
            self._orders.append(order)
            self._ids.add(order_id)

            logger.info(
                f"Order {order_id} created for {order.customer_name} "
                f"({len(order.contents)} item(s))"
            )
            return OrderResult.found(order.model_copy(deep=True))

    def update(self, order_id: str, patch: OrderPatch) -> OrderResult:
        with self._lock:
            index = self._find(order_id)
            if index is None:
                logger.info(f"Update rejected: order {order_id} not found")
                return OrderResult.not_found(order_id)

            updated = self._orders[index].model_copy(deep=True)
            fields = patch.model_fields_set
            if "customer_name" in fields:
                updated.customer_name = patch.customer_name
            if "status" in fields:
                updated.status = patch.status
            if "contents" in fields:
                updated.contents = [item.model_copy() for item in patch.contents]

            self._orders[index] = updated

            logger.info(f"Order {order_id} updated (status={updated.status.value})")
            return OrderResult.found(updated.model_copy(deep=True))

    def seed(self, orders: Iterable[Order]) -> int:
        added = 0
        with self._lock:
            for order in orders:
                if order.id in self._ids:
                    logger.debug(f"Seed order {order.id} already present, skipping")
                    continue
                self._orders.append(order.model_copy(deep=True))
                self._ids.add(order.id)
                added += 1
        return added

    # =========================================================================
    # STATUS
    # =========================================================================

    def count(self) -> int:
        with self._lock:
            return len(self._orders)

    def health_check(self, timeout: float = 1.0) -> bool:
        # A lock held past the timeout means a stuck writer
        acquired = self._lock.acquire(timeout=timeout)
        if acquired:
            self._lock.release()
        return acquired
