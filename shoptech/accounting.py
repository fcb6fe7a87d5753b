"""
Accounting Integration
======================

Core Design: Paid orders are recorded by a legacy accounting system whose
interface predates the order model.

Design Patterns & Strategies Used:
1. Adapter Pattern - AccountingAdapter turns log_sale(order) into
   LegacyAccountingSystem.record_sale(order_id, customer_name, amount)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List

from .errors import ValidationError
from .logger import LoggerFactory
from .order import Order


logger = LoggerFactory.get_logger("shoptech.accounting")


class AccountingService(ABC):
    """Accounting interface expected by the store"""
    
    @abstractmethod
    def log_sale(self, order: Order):
        pass


@dataclass(frozen=True)
class SaleRecord:
    """Sale as stored by the legacy system"""
    order_id: str
    customer_name: str
    amount: float
    recorded_at: datetime


class LegacyAccountingSystem:
    """Legacy accounting system (Adaptee)"""
    
    def __init__(self):
        self.recorded_sales: List[SaleRecord] = []
    
    def record_sale(self, order_id: str, customer_name: str, amount: float):
        if not order_id:
            raise ValidationError("Order ID cannot be null or empty")
        if not customer_name:
            raise ValidationError("Customer name cannot be null or empty")
        if amount is None or amount <= 0:
            raise ValidationError("Amount must be greater than zero")
        
        self.recorded_sales.append(SaleRecord(order_id, customer_name, amount, datetime.now()))
        logger.info(f"LEGACY ACCOUNTING: sale {order_id} recorded for {customer_name}, "
                    f"${amount:.2f} (total sales: {len(self.recorded_sales)})")
    
    def get_total_revenue(self) -> float:
        return sum(sale.amount for sale in self.recorded_sales)


class AccountingAdapter(AccountingService):
    """Adapter from AccountingService to LegacyAccountingSystem"""
    
    def __init__(self, legacy_system: LegacyAccountingSystem):
        if legacy_system is None:
            raise ValidationError("LegacyAccountingSystem cannot be null")
        self.legacy_system = legacy_system
    
    def log_sale(self, order: Order):
        if order is None:
            raise ValidationError("Order cannot be null")
        
        logger.debug("ADAPTER: translating log_sale() -> record_sale()")
        self.legacy_system.record_sale(order.order_id, order.user.name, order.total_amount)
