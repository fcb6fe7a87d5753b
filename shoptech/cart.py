"""
Shopping Cart
=============

Ordered list of priced items (decorated or not) with stock reservation:
adding takes one unit from the base item, removing gives it back.
clear() does not give stock back; it models items consumed by checkout.
"""

from typing import List, Optional

from .errors import ValidationError
from .logger import LoggerFactory
from .products import PricedItem


logger = LoggerFactory.get_logger("shoptech.cart")


class Cart:
    """Shopping cart"""
    
    def __init__(self, max_items: Optional[int] = None):
        if max_items is not None and max_items <= 0:
            raise ValidationError(f"Cart capacity must be positive: {max_items}")
        self.items: List[PricedItem] = []
        self.max_items = max_items
    
    def add_item(self, item: PricedItem):
        """Reserve one unit of the item's stock and append it"""
        if item is None:
            raise ValidationError("Item cannot be null")
        
        base = item.get_base_item()
        if base.stock == 0:
            raise ValidationError(f"Product is out of stock: {base.name}")
        if self.max_items is not None and len(self.items) >= self.max_items:
            raise ValidationError(f"Cart is full ({self.max_items} items)")
        
        base.decrease_stock()
        self.items.append(item)
        logger.info(f"Cart: added {item.product_id} ({base.stock} left in stock)")
    
    def remove_item(self, product_id: str) -> int:
        """Remove every entry with this product ID, restoring one unit each.
        
        Returns the number of entries removed.
        """
        kept: List[PricedItem] = []
        removed = 0
        for item in self.items:
            if item.product_id == product_id:
                item.get_base_item().increase_stock()
                removed += 1
            else:
                kept.append(item)
        self.items = kept
        
        if removed:
            logger.info(f"Cart: removed {removed} x {product_id}")
        else:
            logger.debug(f"Cart: nothing to remove for {product_id}")
        return removed
    
    def get_total(self) -> float:
        return sum(item.get_price() for item in self.items)
    
    def get_items(self) -> List[PricedItem]:
        return list(self.items)
    
    def get_item_count(self) -> int:
        return len(self.items)
    
    def is_empty(self) -> bool:
        return not self.items
    
    def clear(self):
        self.items.clear()
