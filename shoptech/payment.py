"""
Payment Strategies
==================

Core Design: Interchangeable payment algorithms behind a single pay(amount)
contract. Each strategy validates its own credentials when constructed.

Design Patterns & Strategies Used:
1. Strategy Pattern - Credit card, PayPal, reward points
2. Factory Pattern - Create a strategy from a PaymentMethod

No real gateway is involved: card and PayPal payments always succeed,
points payments succeed only while the balance covers the amount
(100 points = $1.00).
"""

from abc import ABC, abstractmethod
from enum import Enum
import math
import re

from .errors import ValidationError
from .logger import LoggerFactory


logger = LoggerFactory.get_logger("shoptech.payment")

POINTS_PER_DOLLAR = 100

_CARD_NUMBER = re.compile(r"[0-9]{16}")


class PaymentMethod(Enum):
    CREDIT_CARD = "CREDIT_CARD"
    PAYPAL = "PAYPAL"
    POINTS = "POINTS"


class PaymentStrategy(ABC):
    """Payment strategy interface"""
    
    @abstractmethod
    def pay(self, amount: float) -> bool:
        pass
    
    @abstractmethod
    def get_payment_method(self) -> PaymentMethod:
        pass


class CreditCardStrategy(PaymentStrategy):
    """Credit card payment (only the last 4 digits are kept)"""
    
    def __init__(self, card_number: str, card_holder: str, expiry_date: str):
        if card_number is None or card_holder is None or expiry_date is None:
            raise ValidationError("All card parameters must be provided")
        if not _CARD_NUMBER.fullmatch(card_number):
            raise ValidationError("Card number must contain exactly 16 digits")
        
        self.card_number = "*" * (len(card_number) - 4) + card_number[-4:]
        self.card_holder = card_holder
        self.expiry_date = expiry_date
    
    def pay(self, amount: float) -> bool:
        logger.info(f"Paid ${amount:.2f} using Credit Card {self.card_number}")
        return True
    
    def get_payment_method(self) -> PaymentMethod:
        return PaymentMethod.CREDIT_CARD


class PayPalStrategy(PaymentStrategy):
    """PayPal payment"""
    
    def __init__(self, email: str):
        if email is None or "@" not in email:
            raise ValidationError(f"Invalid email address: {email}")
        self.email = email
    
    def pay(self, amount: float) -> bool:
        logger.info(f"Paid ${amount:.2f} using PayPal ({self.email})")
        return True
    
    def get_payment_method(self) -> PaymentMethod:
        return PaymentMethod.PAYPAL


class PointsStrategy(PaymentStrategy):
    """Reward points payment"""
    
    def __init__(self, available_points: int):
        if not isinstance(available_points, int) or isinstance(available_points, bool):
            raise ValidationError(f"Available points must be a whole number: {available_points!r}")
        if available_points < 0:
            raise ValidationError("Available points cannot be negative")
        self.available_points = available_points
    
    @staticmethod
    def points_needed(amount: float) -> int:
        return math.floor(amount * POINTS_PER_DOLLAR)
    
    def pay(self, amount: float) -> bool:
        if amount is None or amount <= 0:
            raise ValidationError("Amount must be greater than zero")
        
        needed = self.points_needed(amount)
        if self.available_points >= needed:
            self.available_points -= needed
            logger.info(f"Paid ${amount:.2f} using {needed} points. "
                        f"Remaining points: {self.available_points}")
            return True
        
        logger.warn(f"Insufficient points. Available: {self.available_points}, "
                    f"required: {needed}, missing: {needed - self.available_points}")
        return False
    
    def get_payment_method(self) -> PaymentMethod:
        return PaymentMethod.POINTS


class PaymentStrategyFactory:
    """Factory for creating payment strategies"""
    
    @staticmethod
    def create_strategy(method: PaymentMethod, **details) -> PaymentStrategy:
        """Create a strategy for method from its credentials.
        
        CREDIT_CARD takes card_number, card_holder, expiry_date;
        PAYPAL takes email; POINTS takes available_points.
        """
        try:
            if method == PaymentMethod.CREDIT_CARD:
                return CreditCardStrategy(details["card_number"], details["card_holder"],
                                          details["expiry_date"])
            elif method == PaymentMethod.PAYPAL:
                return PayPalStrategy(details["email"])
            elif method == PaymentMethod.POINTS:
                return PointsStrategy(details["available_points"])
        except KeyError as e:
            raise ValidationError(f"Missing payment detail for {method.value}: {e.args[0]}") from None
        raise ValidationError(f"Unknown payment method: {method}")
