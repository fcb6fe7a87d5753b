"""
ShopTech order lifecycle: priced items with optional extras, a stock
reserving cart, frozen orders with a payment state machine, pluggable
payment strategies and order event observers.
"""

from .errors import StoreError, ValidationError, StateError, PaymentFailure
from .logger import LogLevel, LoggerFactory, configure_logging
from .config import ConfigurationManager
from .products import (
    PricedItem,
    Product,
    Electronics,
    Clothing,
    ProductDecorator,
    WarrantyDecorator,
    GiftWrapDecorator,
    ProductFactory,
    ElectronicsFactory,
    ClothingFactory,
    FactoryRegistry,
)
from .catalog import StoreDatabase
from .cart import Cart
from .payment import (
    PaymentMethod,
    PaymentStrategy,
    CreditCardStrategy,
    PayPalStrategy,
    PointsStrategy,
    PaymentStrategyFactory,
)
from .order import Order, OrderBuilder, OrderObserver, OrderStatus, build_order
from .notifications import User, NotificationService
from .accounting import AccountingService, AccountingAdapter, LegacyAccountingSystem, SaleRecord
from .checkout import CheckoutService

__version__ = "1.0.0"
