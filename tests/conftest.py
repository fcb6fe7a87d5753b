"""Pytest fixtures for shoptech tests."""

import pytest

from shoptech.config import ConfigurationManager
from shoptech.notifications import User
from shoptech.order import OrderObserver
from shoptech.products import Electronics, Clothing


class RecordingObserver(OrderObserver):
    """Observer that records (observer name, order id, event) into a shared log."""

    def __init__(self, name, log=None):
        self.name = name
        self.log = log if log is not None else []

    def update(self, order, event):
        self.log.append((self.name, order.order_id, event))


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts from the default configuration."""
    ConfigurationManager.reset()
    yield ConfigurationManager.instance()
    ConfigurationManager.reset()


@pytest.fixture
def user():
    return User(1, "Test User", "test@test.com", "123 Test St")


@pytest.fixture
def laptop():
    return Electronics("E100", "Test Laptop", 100.0, 5, "Computers")


@pytest.fixture
def shirt():
    return Clothing("C100", "Test Shirt", 20.0, 2, "Apparel")
