"""
Store Configuration
===================

Process-wide key/value settings for the storefront (Singleton Pattern).
Values are kept as strings, the typed getters convert on read.
"""

import threading
from typing import Dict, Optional

from .errors import ValidationError


DEFAULT_CONFIG: Dict[str, str] = {
    "app.name": "ShopTech E-Commerce",
    "app.version": "1.0.0",
    "max.cart.items": "50",
    "currency": "MXN",
    "log.level": "INFO",
}


class ConfigurationManager:
    """Configuration manager (Singleton)"""
    
    _instance = None
    _lock = threading.Lock()
    
    def __init__(self):
        self._configurations: Dict[str, str] = dict(DEFAULT_CONFIG)
    
    @classmethod
    def instance(cls) -> 'ConfigurationManager':
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance
    
    @classmethod
    def reset(cls):
        """Drop the shared instance so the next call starts from defaults"""
        with cls._lock:
            cls._instance = None
    
    def get_config(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._configurations.get(key, default)
    
    def set_config(self, key: str, value: str):
        if key is None or not key.strip():
            raise ValidationError("Configuration key cannot be null or empty")
        self._configurations[key] = str(value)
    
    def has_config(self, key: str) -> bool:
        return key in self._configurations
    
    def get_all_configs(self) -> Dict[str, str]:
        return dict(self._configurations)
    
    def get_int(self, key: str, default: int = 0) -> int:
        value = self.get_config(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            raise ValidationError(f"Configuration '{key}' is not an integer: {value}") from None
    
    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self.get_config(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            raise ValidationError(f"Configuration '{key}' is not a number: {value}") from None
