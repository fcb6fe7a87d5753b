"""
Checkout Service
================

Core Design: Caller-side flow around the order core: fill a cart from the
catalog, turn it into an order, pay, then record the sale.

The sale is sent to accounting exactly once and only after payment
succeeded. A declined payment leaves the order PENDING and the cart
untouched so the customer can retry with another payment method.
"""

from typing import Optional
from uuid import uuid4

from .accounting import AccountingService
from .cart import Cart
from .catalog import StoreDatabase
from .config import ConfigurationManager
from .errors import ValidationError
from .logger import LoggerFactory
from .order import Order, build_order
from .payment import PaymentStrategy
from .products import PricedItem, WarrantyDecorator, GiftWrapDecorator


logger = LoggerFactory.get_logger("shoptech.checkout")


class CheckoutService:
    """Checkout service"""
    
    def __init__(self, catalog: StoreDatabase, accounting: AccountingService,
                 config: Optional[ConfigurationManager] = None):
        if catalog is None or accounting is None:
            raise ValidationError("Catalog and accounting service are required")
        self.catalog = catalog
        self.accounting = accounting
        self.config = config or ConfigurationManager.instance()
    
    def new_cart(self) -> Cart:
        return Cart(max_items=self.config.get_int("max.cart.items", 50))
    
    def add_to_cart(self, cart: Cart, product_id: str,
                    warranty: bool = False, gift_wrap: bool = False) -> PricedItem:
        """Add a catalog product to the cart with optional extras"""
        product = self.catalog.get_product(product_id)
        if product is None:
            raise ValidationError(f"Product not found: {product_id}")
        
        item: PricedItem = product
        if warranty:
            item = WarrantyDecorator(item)
        if gift_wrap:
            item = GiftWrapDecorator(item)
        
        cart.add_item(item)
        return item
    
    def checkout(self, cart: Cart, user, gift_note: Optional[str] = None) -> Order:
        """Freeze the cart's current contents into a PENDING order"""
        if cart is None or cart.is_empty():
            raise ValidationError("Cart is empty")
        
        self._require_customer(user)
        order_id = f"ORD-{uuid4().hex[:8].upper()}"
        return build_order(order_id, user, cart.get_items(), gift_note=gift_note)
    
    def pay(self, order: Order, strategy: PaymentStrategy, cart: Optional[Cart] = None) -> Order:
        """Pay the order and record the sale.
        
        Raises PaymentFailure (order stays PENDING, sale not recorded) or
        StateError if the order was already processed.
        """
        self._require_customer(order.user)
        order.set_payment_strategy(strategy)
        order.process_payment()
        
        self.accounting.log_sale(order)
        if cart is not None:
            cart.clear()
        logger.info(f"Checkout complete for order {order.order_id}")
        return order
    
    @staticmethod
    def _require_customer(user):
        """Accounting needs a customer name; check it before anything is charged"""
        if user is None:
            raise ValidationError("User cannot be null")
        name = getattr(user, "name", None)
        if not name or not str(name).strip():
            raise ValidationError("Customer name cannot be null or empty")
