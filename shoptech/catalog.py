"""
Product Catalog
===============

In-memory product repository. It is constructed explicitly and handed to
whatever assembles carts, so tests get an isolated catalog each time.

The products it returns are the live objects: cart stock reservations
mutate them directly.
"""

from typing import List, Optional, Dict

from .errors import ValidationError
from .logger import LoggerFactory
from .products import Product, FactoryRegistry


logger = LoggerFactory.get_logger("shoptech.catalog")


class StoreDatabase:
    """Product repository"""
    
    def __init__(self, factory_registry: Optional[FactoryRegistry] = None):
        self.products: Dict[str, Product] = {}
        self.factory_registry = factory_registry or FactoryRegistry()
    
    def add_product(self, product: Product):
        if product is None:
            raise ValidationError("Product cannot be null")
        if product.product_id in self.products:
            raise ValidationError(f"Duplicate product ID: {product.product_id}")
        self.products[product.product_id] = product
        logger.debug(f"Catalog: added {product.product_id} ({product.name})")
    
    def get_product(self, product_id: str) -> Optional[Product]:
        return self.products.get(product_id)
    
    def get_all_products(self) -> List[Product]:
        return list(self.products.values())
    
    def get_products_by_category(self, category: str) -> List[Product]:
        return [p for p in self.products.values() if p.category == category]
    
    def get_available_products(self) -> List[Product]:
        return [p for p in self.products.values() if p.stock > 0]
    
    def init_mock_data(self):
        """Seed the catalog with the sample products"""
        registry = self.factory_registry
        self.add_product(registry.create_product("ELECTRONICS", "E001", "Laptop Dell XPS", 1500.00, 10, "Computers"))
        self.add_product(registry.create_product("ELECTRONICS", "E002", "iPhone 15 Pro", 1200.00, 25, "Smartphones"))
        self.add_product(registry.create_product("ELECTRONICS", "E003", "Monitor LG 27'", 300.50, 15, "Monitors"))
        self.add_product(registry.create_product("CLOTHING", "C001", "Nike T-Shirt", 25.00, 50, "Apparel"))
        self.add_product(registry.create_product("CLOTHING", "C002", "Levi's Jeans", 79.99, 30, "Apparel"))
        logger.info(f"Catalog: {len(self.products)} products loaded")
