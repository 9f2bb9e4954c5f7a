from .warehouse import Warehouse
from .stock import Stock
from .stock_move import StockMove

__all__ = [
    "Warehouse",
    "Stock",
    "StockMove",
]
