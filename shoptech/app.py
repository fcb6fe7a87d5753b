"""
ShopTech Demonstration
======================

Scripted walk through the whole order lifecycle: catalog, cart with
extras, order, failed and successful payment, notifications and the
legacy accounting record.
"""

from .accounting import AccountingAdapter, LegacyAccountingSystem
from .catalog import StoreDatabase
from .checkout import CheckoutService
from .config import ConfigurationManager
from .errors import PaymentFailure
from .logger import LogLevel, configure_logging
from .notifications import NotificationService, User
from .order import OrderStatus
from .payment import PaymentMethod, PaymentStrategyFactory


def main():
    config = ConfigurationManager.instance()
    currency = config.get_config("currency", "USD")
    configure_logging(LogLevel.from_name(config.get_config("log.level", "INFO")))
    
    print("=" * 60)
    print(f"{config.get_config('app.name').upper()} v{config.get_config('app.version')}")
    print("=" * 60)
    print()
    
    catalog = StoreDatabase()
    catalog.init_mock_data()
    legacy = LegacyAccountingSystem()
    service = CheckoutService(catalog, AccountingAdapter(legacy), config)
    user = User(1, "Marco Palazuelos", "marco@example.com", "Av. Reforma 123")
    
    print("1. Catalog:")
    for product in catalog.get_all_products():
        print(f"   {product.get_details()} | Stock: {product.stock}")
    print()
    
    print("2. Filling the cart:")
    cart = service.new_cart()
    service.add_to_cart(cart, "E001", warranty=True, gift_wrap=True)
    service.add_to_cart(cart, "C001")
    for item in cart.get_items():
        print(f"   - {item.name} | ${item.get_price():.2f} | {item.get_details()}")
    print(f"   Cart total: ${cart.get_total():.2f} {currency}")
    print()
    
    print("3. Checkout:")
    order = service.checkout(cart, user, gift_note="Happy birthday!")
    order.subscribe(NotificationService("Warehouse"))
    print(f"   {order}")
    print()
    
    print("4. Paying with too few points:")
    points = PaymentStrategyFactory.create_strategy(PaymentMethod.POINTS, available_points=5000)
    try:
        service.pay(order, points, cart)
    except PaymentFailure as e:
        print(f"   Declined: {e}")
        print(f"   Order status: {order.status.value}")
    print()
    
    print("5. Paying with a credit card:")
    card = PaymentStrategyFactory.create_strategy(
        PaymentMethod.CREDIT_CARD,
        card_number="1234567812345678",
        card_holder=user.name,
        expiry_date="12/27"
    )
    service.pay(order, card, cart)
    print(f"   Order status: {order.status.value}")
    print(f"   Cart empty: {cart.is_empty()}")
    print()
    
    print("6. Shipping:")
    order.set_status(OrderStatus.SHIPPED)
    print(f"   Emails received by {user.name}: {len(user.inbox)}")
    print(f"   Revenue recorded: ${legacy.get_total_revenue():.2f} {currency}")
    print()
    
    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Decorator Pattern - Warranty and gift wrap surcharges")
    print("2. Builder Pattern - Validated, frozen orders")
    print("3. State Pattern - Order status transitions")
    print("4. Strategy Pattern - Credit card, PayPal, points")
    print("5. Observer Pattern - Customer and system notifications")
    print("6. Adapter Pattern - Legacy accounting system")
    print("7. Factory Pattern - Products and payment strategies")
    print("=" * 60)


if __name__ == "__main__":
    main()
