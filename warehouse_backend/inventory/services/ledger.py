# inventory/services/ledger.py

"""
PATH: inventory/services/ledger.py

STOCK LEDGER (APPLICATION SERVICE)

Purpose:
- Single write path for inventory.Stock quantities.
- Every mutation appends one immutable StockMove.

Rules:
- "No row" and "row with quantity 0" read the same (0).
- A row is only created on the first increment.
- Mutations lock the Stock row (SELECT ... FOR UPDATE) and must run inside
  the caller's transaction, so check and write see the same quantity.
- amount must be a positive integer; zero lines are filtered by callers.
"""

from __future__ import annotations

import logging

from django.db import transaction

from inventory.models import Stock, StockMove

from .exceptions import InsufficientStockError

logger = logging.getLogger(__name__)


def _as_amount(amount) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError("amount must be an integer")
    if amount <= 0:
        raise ValueError("amount must be greater than zero")
    return amount


def get_quantity(*, product_id, warehouse_id) -> int:
    row = (
        Stock.objects.filter(product_id=product_id, warehouse_id=warehouse_id)
        .values_list("quantity", flat=True)
        .first()
    )
    return int(row or 0)


def locked_quantity(*, product_id, warehouse_id) -> int:
    """
    Row-locked read. Only meaningful inside transaction.atomic.
    Absent rows cannot be locked and read as 0.
    """
    row = (
        Stock.objects.select_for_update()
        .filter(product_id=product_id, warehouse_id=warehouse_id)
        .values_list("quantity", flat=True)
        .first()
    )
    return int(row or 0)


def _locked_row_for_increment(*, product_id, warehouse_id) -> Stock:
    # get_or_create re-reads the row if a concurrent first insert wins the
    # unique constraint.
    stock, _ = Stock.objects.select_for_update().get_or_create(
        product_id=product_id,
        warehouse_id=warehouse_id,
        defaults={"quantity": 0},
    )
    return stock


@transaction.atomic
def increment(
    *,
    product_id,
    warehouse_id,
    amount: int,
    reason: str,
    reference_id=None,
    user=None,
) -> int:
    amount = _as_amount(amount)

    stock = _locked_row_for_increment(product_id=product_id, warehouse_id=warehouse_id)
    stock.quantity = stock.quantity + amount
    stock.save(update_fields=["quantity", "updated_at"])

    StockMove.objects.create(
        product_id=product_id,
        warehouse_id=warehouse_id,
        direction=StockMove.Direction.IN,
        reason=reason,
        quantity=amount,
        reference_id=reference_id,
        performed_by=user,
    )

    logger.debug(
        "Stock incremented",
        extra={
            "product_id": str(product_id),
            "warehouse_id": str(warehouse_id),
            "amount": amount,
            "reason": reason,
        },
    )
    return stock.quantity


@transaction.atomic
def decrement(
    *,
    product_id,
    warehouse_id,
    amount: int,
    reason: str,
    reference_id=None,
    user=None,
) -> int:
    amount = _as_amount(amount)

    stock = (
        Stock.objects.select_for_update()
        .filter(product_id=product_id, warehouse_id=warehouse_id)
        .first()
    )
    available = stock.quantity if stock else 0

    if available < amount:
        raise InsufficientStockError(
            f"Insufficient stock: available {available}, requested {amount}",
            product_id=product_id,
            warehouse_id=warehouse_id,
            available=available,
            requested=amount,
        )

    stock.quantity = available - amount
    stock.save(update_fields=["quantity", "updated_at"])

    StockMove.objects.create(
        product_id=product_id,
        warehouse_id=warehouse_id,
        direction=StockMove.Direction.OUT,
        reason=reason,
        quantity=amount,
        reference_id=reference_id,
        performed_by=user,
    )

    logger.debug(
        "Stock decremented",
        extra={
            "product_id": str(product_id),
            "warehouse_id": str(warehouse_id),
            "amount": amount,
            "reason": reason,
        },
    )
    return stock.quantity
