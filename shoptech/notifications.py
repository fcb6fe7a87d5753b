"""
Order Notifications
===================

Concrete observers for order events: the customer (simulated email) and
named system notifiers.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .errors import ValidationError
from .logger import LoggerFactory
from .order import Order, OrderObserver


logger = LoggerFactory.get_logger("shoptech.notifications")


@dataclass(eq=False)
class User(OrderObserver):
    """Customer; receives an email for every order event"""
    user_id: int
    name: str
    email: str
    shipping_address: str = ""
    reward_points: int = 0
    inbox: List[Tuple[str, str]] = field(default_factory=list)
    
    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValidationError("User name cannot be null or empty")
    
    def update(self, order: Order, event: str):
        self.inbox.append((order.order_id, event))
        logger.info(f"EMAIL to {self.name} <{self.email}> | "
                    f"Order Update - {order.order_id} | {event} | Total: ${order.total_amount:.2f}")


class NotificationService(OrderObserver):
    """System-side notifier (warehouse, support, ...)"""
    
    def __init__(self, service_name: str):
        self.service_name = service_name
        self.events: List[Tuple[str, str]] = []
    
    def update(self, order: Order, event: str):
        self.events.append((order.order_id, event))
        logger.info(f"[{self.service_name}] Order {order.order_id}: {event} "
                    f"(customer: {order.user.name}, total: ${order.total_amount:.2f})")
