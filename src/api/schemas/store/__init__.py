# schemas/store/__init__.py
from .store import StoreAddress, StoreCreate, StoreUpdate, StoreFilter, StoreResponse

__all__ = [
    'StoreAddress',
    'StoreCreate',
    'StoreUpdate',
    'StoreFilter',
    'StoreResponse',
]
