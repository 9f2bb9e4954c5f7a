# inventory/services/exceptions.py


class InventoryError(Exception):
    """Base class for stock ledger and warehouse errors."""


class WarehouseNotFoundError(InventoryError):
    pass


class DuplicateWarehouseError(InventoryError):
    pass


class WarehouseInUseError(InventoryError):
    pass


class InsufficientStockError(InventoryError):
    def __init__(self, message, *, product_id=None, warehouse_id=None, available=0, requested=0):
        super().__init__(message)
        self.product_id = product_id
        self.warehouse_id = warehouse_id
        self.available = available
        self.requested = requested
