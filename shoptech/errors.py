"""
Store Errors
============

Exception taxonomy shared by every part of the order lifecycle.

- ValidationError - malformed or missing input (construction or call time)
- StateError - operation not allowed in the object's current state
- PaymentFailure - the payment strategy declined the charge
"""

from typing import Optional


class StoreError(Exception):
    """Base exception for all store errors"""
    pass


class ValidationError(StoreError, ValueError):
    """Raised when an input is missing or malformed"""
    pass


class StateError(StoreError):
    """Raised when an operation is invalid for the current state"""
    pass


class PaymentFailure(StoreError):
    """Raised when a payment strategy reports failure"""
    
    def __init__(self, order_id: str, amount: float, reason: Optional[str] = None):
        self.order_id = order_id
        self.amount = amount
        self.reason = reason
        msg = f"Payment of ${amount:.2f} failed for order {order_id}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
