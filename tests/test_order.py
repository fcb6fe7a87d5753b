"""Tests for OrderBuilder, the order state machine and observer fan-out."""

import pytest

from shoptech.cart import Cart
from shoptech.errors import PaymentFailure, StateError, ValidationError
from shoptech.order import OrderBuilder, OrderStatus, build_order
from shoptech.payment import CreditCardStrategy, PaymentMethod, PaymentStrategy, PayPalStrategy, PointsStrategy
from shoptech.products import Electronics, GiftWrapDecorator, WarrantyDecorator

from .conftest import RecordingObserver


class SpyStrategy(PaymentStrategy):
    """Strategy that records calls and answers with a fixed result."""

    def __init__(self, result=True):
        self.result = result
        self.calls = []

    def pay(self, amount):
        self.calls.append(amount)
        return self.result

    def get_payment_method(self):
        return PaymentMethod.CREDIT_CARD


class ExplodingObserver(RecordingObserver):
    def update(self, order, event):
        super().update(order, event)
        raise RuntimeError("observer failed")


class TestOrderBuilder:
    def test_single_item_order(self, user, laptop):
        order = OrderBuilder().set_order_id("ORD-1").set_user(user).set_items([laptop]).build()

        assert order.order_id == "ORD-1"
        assert order.total_amount == 100.0
        assert order.status == OrderStatus.PENDING
        assert order.user is user
        assert order.payment_strategy is None
        assert order.gift_note is None

    def test_total_includes_surcharges(self, user, laptop, shirt):
        items = [GiftWrapDecorator(WarrantyDecorator(laptop)), shirt]
        order = build_order("ORD-2", user, items)

        assert order.total_amount == sum(item.get_price() for item in order.items)
        assert order.total_amount == 180.0

    def test_optional_fields(self, user, laptop):
        strategy = PayPalStrategy("test@paypal.com")
        order = build_order("ORD-3", user, [laptop], payment_strategy=strategy,
                            gift_note="Congrats!", status=OrderStatus.PENDING)

        assert order.payment_strategy is strategy
        assert order.gift_note == "Congrats!"

    def test_owner_subscribed_first(self, user, laptop):
        order = build_order("ORD-4", user, [laptop])

        assert order.observers == [user]

    def test_items_snapshot_decoupled_from_cart(self, user, laptop, shirt):
        cart = Cart()
        cart.add_item(laptop)
        order = build_order("ORD-5", user, cart.get_items())

        cart.add_item(shirt)
        cart.clear()

        assert order.items == (laptop,)
        assert order.total_amount == 100.0

    def test_total_fixed_after_price_change(self, user, laptop):
        order = build_order("ORD-6", user, [laptop])
        laptop.price = 1.0

        assert order.total_amount == 100.0

    @pytest.mark.parametrize("order_id", [None, ""])
    def test_empty_order_id(self, order_id):
        with pytest.raises(ValidationError):
            OrderBuilder().set_order_id(order_id)

    def test_null_user(self):
        with pytest.raises(ValidationError):
            OrderBuilder().set_user(None)

    @pytest.mark.parametrize("items", [None, []])
    def test_empty_items(self, items):
        with pytest.raises(ValidationError):
            OrderBuilder().set_items(items)

    def test_build_missing_fields(self, user, laptop):
        with pytest.raises(ValidationError, match="missing required fields"):
            OrderBuilder().set_order_id("ORD-7").set_items([laptop]).build()
        with pytest.raises(ValidationError):
            OrderBuilder().set_user(user).set_items([laptop]).build()
        with pytest.raises(ValidationError):
            OrderBuilder().set_order_id("ORD-7").set_user(user).build()

    def test_zero_total_rejected(self, user):
        freebie = Electronics("F1", "Freebie", 0.0, 1, "Misc")

        with pytest.raises(ValidationError, match="greater than zero"):
            build_order("ORD-8", user, [freebie])

    def test_read_only_fields(self, user, laptop):
        order = build_order("ORD-9", user, [laptop], gift_note="Hi")

        with pytest.raises(AttributeError):
            order.gift_note = "Changed"
        with pytest.raises(AttributeError):
            order.total_amount = 1.0
        with pytest.raises(AttributeError):
            order.status = OrderStatus.PAID


class TestProcessPayment:
    def test_points_exact_balance(self, user, laptop):
        product = Electronics("E50", "Half", 50.0, 1, "Misc")
        strategy = PointsStrategy(5000)
        order = build_order("ORD-PTS-1", user, [product], payment_strategy=strategy)

        order.process_payment()

        assert order.status == OrderStatus.PAID
        assert strategy.available_points == 0

    def test_points_insufficient(self, user, laptop):
        strategy = PointsStrategy(5000)
        order = build_order("ORD-PTS-2", user, [laptop], payment_strategy=strategy)

        with pytest.raises(PaymentFailure) as exc_info:
            order.process_payment()

        assert exc_info.value.order_id == "ORD-PTS-2"
        assert exc_info.value.amount == 100.0
        assert order.status == OrderStatus.PENDING
        assert strategy.available_points == 5000
        assert user.inbox == []

    def test_retry_with_another_strategy(self, user, laptop):
        order = build_order("ORD-10", user, [laptop], payment_strategy=PointsStrategy(10))

        with pytest.raises(PaymentFailure):
            order.process_payment()

        order.set_payment_strategy(CreditCardStrategy("1234567812345678", "Test", "12/25"))
        order.process_payment()
        assert order.status == OrderStatus.PAID

    def test_owner_notified_once(self, user, laptop):
        order = build_order("ORD-11", user, [laptop],
                            payment_strategy=PayPalStrategy("test@paypal.com"))

        order.process_payment()

        assert len(user.inbox) == 1
        order_id, event = user.inbox[0]
        assert order_id == "ORD-11"
        assert "PENDING" in event
        assert "PAID" in event

    def test_strategy_receives_total(self, user, laptop):
        spy = SpyStrategy()
        order = build_order("ORD-12", user, [WarrantyDecorator(laptop)], payment_strategy=spy)

        order.process_payment()

        assert spy.calls == [150.0]

    def test_no_strategy(self, user, laptop):
        order = build_order("ORD-13", user, [laptop])

        with pytest.raises(StateError, match="not set"):
            order.process_payment()
        assert order.status == OrderStatus.PENDING

    @pytest.mark.parametrize(
        "status",
        [OrderStatus.PAID, OrderStatus.SHIPPED, OrderStatus.DELIVERED, OrderStatus.CANCELED],
    )
    def test_non_pending_never_invokes_strategy(self, user, laptop, status):
        spy = SpyStrategy()
        order = build_order("ORD-14", user, [laptop], payment_strategy=spy, status=status)

        with pytest.raises(StateError):
            order.process_payment()

        assert spy.calls == []
        assert order.status == status

    def test_pay_twice(self, user, laptop):
        spy = SpyStrategy()
        order = build_order("ORD-15", user, [laptop], payment_strategy=spy)
        order.process_payment()

        with pytest.raises(StateError):
            order.process_payment()
        assert len(spy.calls) == 1

    def test_strategy_locked_after_payment(self, user, laptop):
        order = build_order("ORD-16", user, [laptop], payment_strategy=SpyStrategy())
        order.process_payment()

        with pytest.raises(StateError):
            order.set_payment_strategy(SpyStrategy())

    def test_null_strategy(self, user, laptop):
        order = build_order("ORD-17", user, [laptop])

        with pytest.raises(ValidationError):
            order.set_payment_strategy(None)


class TestSetStatus:
    def test_notifies_transition(self, user, laptop):
        order = build_order("ORD-20", user, [laptop])

        order.set_status(OrderStatus.CANCELED)

        assert order.status == OrderStatus.CANCELED
        assert user.inbox == [("ORD-20", "Order status changed from PENDING to CANCELED")]

    def test_notifies_even_when_unchanged(self, user, laptop):
        order = build_order("ORD-21", user, [laptop])

        order.set_status(OrderStatus.PENDING)

        assert user.inbox == [("ORD-21", "Order status changed from PENDING to PENDING")]

    def test_null_status(self, user, laptop):
        order = build_order("ORD-22", user, [laptop])

        with pytest.raises(ValidationError):
            order.set_status(None)
        assert order.status == OrderStatus.PENDING
        assert user.inbox == []


class TestObservers:
    def test_subscription_order(self, user, laptop):
        log = []
        first = RecordingObserver("first", log)
        second = RecordingObserver("second", log)
        order = build_order("ORD-30", user, [laptop])
        order.subscribe(first)
        order.subscribe(second)

        order.notify_observers("hello")

        assert log == [("first", "ORD-30", "hello"), ("second", "ORD-30", "hello")]
        assert user.inbox == [("ORD-30", "hello")]

    def test_unsubscribe(self, user, laptop):
        observer = RecordingObserver("obs")
        order = build_order("ORD-31", user, [laptop])
        order.subscribe(observer)
        order.unsubscribe(observer)

        order.notify_observers("hello")

        assert observer.log == []
        assert order.observers == [user]

    def test_unsubscribe_not_subscribed(self, user, laptop):
        order = build_order("ORD-32", user, [laptop])

        with pytest.raises(StateError):
            order.unsubscribe(RecordingObserver("stranger"))

    def test_null_observer(self, user, laptop):
        order = build_order("ORD-33", user, [laptop])

        with pytest.raises(ValidationError):
            order.subscribe(None)
        with pytest.raises(ValidationError):
            order.unsubscribe(None)

    @pytest.mark.parametrize("event", [None, ""])
    def test_empty_event(self, user, laptop, event):
        order = build_order("ORD-34", user, [laptop])

        with pytest.raises(ValidationError):
            order.notify_observers(event)
        assert user.inbox == []

    def test_failing_observer_stops_delivery(self, user, laptop):
        log = []
        order = build_order("ORD-35", user, [laptop])
        order.subscribe(ExplodingObserver("boom", log))
        order.subscribe(RecordingObserver("after", log))

        with pytest.raises(RuntimeError):
            order.notify_observers("hello")

        assert log == [("boom", "ORD-35", "hello")]
        assert user.inbox == [("ORD-35", "hello")]

    def test_observer_unsubscribing_itself_during_update(self, user, laptop):
        log = []

        class OneShot(RecordingObserver):
            def update(self, order, event):
                super().update(order, event)
                order.unsubscribe(self)

        order = build_order("ORD-36", user, [laptop])
        order.subscribe(OneShot("once", log))
        order.subscribe(RecordingObserver("always", log))

        order.notify_observers("first")
        order.notify_observers("second")

        assert log == [
            ("once", "ORD-36", "first"),
            ("always", "ORD-36", "first"),
            ("always", "ORD-36", "second"),
        ]

    def test_same_observer_twice_gets_two_updates(self, user, laptop):
        observer = RecordingObserver("dup")
        order = build_order("ORD-37", user, [laptop])
        order.subscribe(observer)
        order.subscribe(observer)

        order.notify_observers("hello")

        assert len(observer.log) == 2
