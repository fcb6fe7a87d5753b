"""
Products and Pricing
====================

Core Design: Sellable items whose price can be extended with optional
services without touching the item itself.

Design Patterns & Strategies Used:
1. Decorator Pattern - Surcharge layers (Warranty, Gift wrap) around an item
2. Factory Method - One factory per product type
3. Registry - Create products by type name

Every priced item, decorated or not, answers the same questions:
product_id, name, stock, category, get_price() and get_details().
Decorators delegate identity and stock to the innermost base item and
compose price/details outward.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Set

from .errors import ValidationError


class PricedItem(ABC):
    """Priced item interface"""
    
    @abstractmethod
    def get_price(self) -> float:
        pass
    
    @abstractmethod
    def get_details(self) -> str:
        pass
    
    @abstractmethod
    def get_base_item(self) -> 'Product':
        """Innermost undecorated product (owner of the stock counter)"""
        pass


@dataclass
class Product(PricedItem):
    """Product entity"""
    product_id: str
    name: str
    price: float
    stock: int
    category: str
    
    def __post_init__(self):
        if not self.product_id:
            raise ValidationError("Product ID cannot be null or empty")
        if self.price < 0:
            raise ValidationError(f"Price cannot be negative: {self.price}")
        if self.stock < 0:
            raise ValidationError(f"Stock cannot be negative: {self.stock}")
    
    def get_price(self) -> float:
        return self.price
    
    def get_details(self) -> str:
        return f"Product [ID: {self.product_id}, Name: {self.name}, Price: ${self.price:.2f}]"
    
    def get_base_item(self) -> 'Product':
        return self
    
    def decrease_stock(self):
        """Take one unit out of stock"""
        if self.stock <= 0:
            raise ValidationError(f"Product is out of stock: {self.name}")
        self.stock -= 1
    
    def increase_stock(self):
        """Put one unit back into stock"""
        self.stock += 1


class Electronics(Product):
    """Electronics product"""
    
    def get_details(self) -> str:
        return f"Electronics [ID: {self.product_id}, Name: {self.name}, Price: ${self.price:.2f}]"


class Clothing(Product):
    """Clothing product"""
    
    def get_details(self) -> str:
        return f"Clothing [ID: {self.product_id}, Name: {self.name}, Price: ${self.price:.2f}]"


# ==================== DECORATOR PATTERN ====================

class ProductDecorator(PricedItem):
    """Base decorator: adds a fixed surcharge and a details suffix"""
    
    SURCHARGE = 0.0
    SUFFIX = ""
    
    def __init__(self, item: PricedItem):
        if item is None:
            raise ValidationError("Cannot decorate a null item")
        if not isinstance(item, PricedItem):
            raise ValidationError(f"Cannot decorate {type(item).__name__}: not a priced item")
        self._item = item
    
    @property
    def item(self) -> PricedItem:
        """Wrapped item (fixed at construction, so the chain cannot loop)"""
        return self._item
    
    @property
    def product_id(self) -> str:
        return self._item.product_id
    
    @property
    def name(self) -> str:
        return self._item.name
    
    @property
    def stock(self) -> int:
        return self._item.stock
    
    @property
    def category(self) -> str:
        return self._item.category
    
    @property
    def price(self) -> float:
        return self.get_price()
    
    def get_price(self) -> float:
        return self._item.get_price() + self.SURCHARGE
    
    def get_details(self) -> str:
        return self._item.get_details() + self.SUFFIX
    
    def get_base_item(self) -> Product:
        return self._item.get_base_item()
    
    def __repr__(self):
        return f"{type(self).__name__}({self._item!r})"


class WarrantyDecorator(ProductDecorator):
    """Extended warranty (+$50.00)"""
    
    SURCHARGE = 50.00
    SUFFIX = "Includes extended warranty for 2 years."


class GiftWrapDecorator(ProductDecorator):
    """Gift wrapping (+$10.00)"""
    
    SURCHARGE = 10.00
    SUFFIX = "Includes gift wrapping."


# ==================== FACTORY METHOD ====================

class ProductFactory(ABC):
    """Product factory interface"""
    
    @abstractmethod
    def create_product(self, product_id: str, name: str, price: float,
                       stock: int, category: str) -> Product:
        pass


class ElectronicsFactory(ProductFactory):
    """Creates Electronics products"""
    
    def create_product(self, product_id: str, name: str, price: float,
                       stock: int, category: str) -> Product:
        return Electronics(product_id, name, price, stock, category)


class ClothingFactory(ProductFactory):
    """Creates Clothing products"""
    
    def create_product(self, product_id: str, name: str, price: float,
                       stock: int, category: str) -> Product:
        return Clothing(product_id, name, price, stock, category)


class FactoryRegistry:
    """Creates products by type name (case-insensitive)"""
    
    def __init__(self):
        self.factories: Dict[str, ProductFactory] = {}
        self.register_factory("ELECTRONICS", ElectronicsFactory())
        self.register_factory("CLOTHING", ClothingFactory())
    
    def register_factory(self, product_type: str, factory: ProductFactory):
        if not product_type or factory is None:
            raise ValidationError("Product type and factory cannot be null")
        self.factories[product_type.upper()] = factory
    
    def create_product(self, product_type: str, product_id: str, name: str,
                       price: float, stock: int, category: str) -> Product:
        if product_type is None:
            raise ValidationError("Product type cannot be null")
        
        factory = self.factories.get(product_type.upper())
        if factory is None:
            raise ValidationError(f"No factory registered for product type: {product_type}")
        
        return factory.create_product(product_id, name, price, stock, category)
    
    def has_factory(self, product_type: str) -> bool:
        return product_type is not None and product_type.upper() in self.factories
    
    def get_registered_types(self) -> Set[str]:
        return set(self.factories.keys())
