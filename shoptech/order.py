"""
Order Lifecycle
===============

Core Design: An order frozen at build time (identity, items, total) whose
status moves through a small state machine and is broadcast to observers.

Design Patterns & Strategies Used:
1. Builder Pattern - OrderBuilder / build_order validate and freeze an order
2. State Pattern - PENDING -> PAID -> (SHIPPED -> DELIVERED | CANCELED)
3. Strategy Pattern - Payment delegated to a PaymentStrategy
4. Observer Pattern - Status changes pushed to subscribed observers

Only the PENDING -> PAID transition is guarded (process_payment).
set_status() is the unguarded escape hatch for the later states.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .errors import PaymentFailure, StateError, ValidationError
from .logger import LoggerFactory
from .payment import PaymentStrategy
from .products import PricedItem


logger = LoggerFactory.get_logger("shoptech.order")


class OrderStatus(Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELED = "CANCELED"


class OrderObserver(ABC):
    """Observer interface"""
    
    @abstractmethod
    def update(self, order: 'Order', event: str):
        pass


def status_change_event(old: OrderStatus, new: OrderStatus) -> str:
    return f"Order status changed from {old.value} to {new.value}"


class Order:
    """Order with state management (Subject for Observer Pattern)
    
    Created through OrderBuilder or build_order(); the item snapshot and
    total never change afterwards.
    """
    
    def __init__(self, order_id: str, user, items: Sequence[PricedItem], total_amount: float,
                 status: OrderStatus = OrderStatus.PENDING,
                 payment_strategy: Optional[PaymentStrategy] = None,
                 gift_note: Optional[str] = None):
        self._order_id = order_id
        self._user = user
        self._items: Tuple[PricedItem, ...] = tuple(items)
        self._total_amount = total_amount
        self._status = status
        self._payment_strategy = payment_strategy
        self._gift_note = gift_note
        self._observers: List[OrderObserver] = []
    
    @property
    def order_id(self) -> str:
        return self._order_id
    
    @property
    def user(self):
        return self._user
    
    @property
    def items(self) -> Tuple[PricedItem, ...]:
        return self._items
    
    @property
    def total_amount(self) -> float:
        return self._total_amount
    
    @property
    def status(self) -> OrderStatus:
        return self._status
    
    @property
    def gift_note(self) -> Optional[str]:
        return self._gift_note
    
    @property
    def payment_strategy(self) -> Optional[PaymentStrategy]:
        return self._payment_strategy
    
    @property
    def observers(self) -> List[OrderObserver]:
        return list(self._observers)
    
    def set_payment_strategy(self, strategy: PaymentStrategy):
        """Choose how to pay; allowed only while the order is PENDING"""
        if strategy is None:
            raise ValidationError("Payment strategy cannot be null")
        if self._status != OrderStatus.PENDING:
            raise StateError(f"Cannot change payment method of a {self._status.value} order")
        self._payment_strategy = strategy
    
    # ==================== STATE PATTERN ====================
    
    def process_payment(self):
        """Charge the total through the payment strategy.
        
        On success the order becomes PAID and observers are notified.
        On failure the order stays PENDING (so another strategy can be
        tried) and PaymentFailure is raised without notifying anyone.
        """
        if self._payment_strategy is None:
            raise StateError("Payment method not set")
        if self._status != OrderStatus.PENDING:
            raise StateError(f"Order {self._order_id} is {self._status.value}, only PENDING orders can be paid")
        if self._total_amount <= 0:
            raise ValidationError("Total amount must be greater than zero")
        
        method = self._payment_strategy.get_payment_method().value
        logger.info(f"Order {self._order_id}: charging ${self._total_amount:.2f} via {method}")
        
        if self._payment_strategy.pay(self._total_amount):
            old = self._status
            self._status = OrderStatus.PAID
            logger.info(f"Order {self._order_id}: {old.value} -> {self._status.value}")
            self.notify_observers(status_change_event(old, self._status))
        else:
            self._status = OrderStatus.PENDING
            logger.warn(f"Order {self._order_id}: payment via {method} declined")
            raise PaymentFailure(self._order_id, self._total_amount, f"{method} payment declined")
    
    def set_status(self, new_status: OrderStatus):
        """Set the status unconditionally and notify, even if unchanged"""
        if new_status is None:
            raise ValidationError("Order status cannot be null")
        
        old = self._status
        self._status = new_status
        logger.info(f"Order {self._order_id}: {old.value} -> {new_status.value}")
        self.notify_observers(status_change_event(old, new_status))
    
    # ==================== OBSERVER PATTERN ====================
    
    def subscribe(self, observer: OrderObserver):
        if observer is None:
            raise ValidationError("Observer cannot be null")
        self._observers.append(observer)
    
    def unsubscribe(self, observer: OrderObserver):
        if observer is None:
            raise ValidationError("Observer cannot be null")
        for i, subscribed in enumerate(self._observers):
            if subscribed is observer:
                del self._observers[i]
                return
        raise StateError("Observer is not subscribed to this order")
    
    def notify_observers(self, event: str):
        """Deliver event to every observer in subscription order.
        
        Works on a snapshot of the list, so observers may (un)subscribe
        from inside update(). An observer that raises stops delivery to
        the ones after it.
        """
        if not event:
            raise ValidationError("Event cannot be empty")
        for observer in list(self._observers):
            observer.update(self, event)
    
    def __repr__(self):
        return (f"Order(order_id={self._order_id!r}, status={self._status.value}, "
                f"total={self._total_amount:.2f}, items={len(self._items)})")


# ==================== BUILDER PATTERN ====================

class OrderBuilder:
    """Fluent validating builder for Order"""
    
    def __init__(self):
        self.order_id: Optional[str] = None
        self.user = None
        self.items: Optional[List[PricedItem]] = None
        self.status = OrderStatus.PENDING
        self.payment_strategy: Optional[PaymentStrategy] = None
        self.gift_note: Optional[str] = None
    
    def set_order_id(self, order_id: str) -> 'OrderBuilder':
        if not order_id:
            raise ValidationError("Order ID cannot be null or empty")
        self.order_id = order_id
        return self
    
    def set_user(self, user) -> 'OrderBuilder':
        if user is None:
            raise ValidationError("User cannot be null")
        self.user = user
        return self
    
    def set_items(self, items: Sequence[PricedItem]) -> 'OrderBuilder':
        if not items:
            raise ValidationError("Items cannot be null or empty")
        self.items = list(items)
        return self
    
    def set_status(self, status: OrderStatus) -> 'OrderBuilder':
        if status is None:
            raise ValidationError("Order status cannot be null")
        self.status = status
        return self
    
    def set_payment_strategy(self, strategy: PaymentStrategy) -> 'OrderBuilder':
        self.payment_strategy = strategy
        return self
    
    def set_gift_note(self, gift_note: str) -> 'OrderBuilder':
        self.gift_note = gift_note
        return self
    
    def build(self) -> Order:
        if not self.order_id or self.user is None or not self.items:
            raise ValidationError("Cannot create Order, missing required fields")
        
        total = self._calculate_total()
        order = Order(
            order_id=self.order_id,
            user=self.user,
            items=self.items,
            total_amount=total,
            status=self.status,
            payment_strategy=self.payment_strategy,
            gift_note=self.gift_note
        )
        order.subscribe(self.user)
        logger.info(f"Order {order.order_id} created: {len(order.items)} items, "
                    f"total ${total:.2f}, status {order.status.value}")
        return order
    
    def _calculate_total(self) -> float:
        total = sum(item.get_price() for item in self.items)
        if total <= 0:
            raise ValidationError("Total amount must be greater than zero")
        return total


def build_order(order_id: str, user, items: Sequence[PricedItem],
                payment_strategy: Optional[PaymentStrategy] = None,
                gift_note: Optional[str] = None,
                status: OrderStatus = OrderStatus.PENDING) -> Order:
    """Validate the inputs and return a frozen Order (raises ValidationError)"""
    return (OrderBuilder()
            .set_order_id(order_id)
            .set_user(user)
            .set_items(items)
            .set_status(status)
            .set_payment_strategy(payment_strategy)
            .set_gift_note(gift_note)
            .build())
