from .exceptions import (
    DuplicateWarehouseError,
    InsufficientStockError,
    InventoryError,
    WarehouseInUseError,
    WarehouseNotFoundError,
)

__all__ = [
    "DuplicateWarehouseError",
    "InsufficientStockError",
    "InventoryError",
    "WarehouseInUseError",
    "WarehouseNotFoundError",
]
