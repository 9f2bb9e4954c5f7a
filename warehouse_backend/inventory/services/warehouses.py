# inventory/services/warehouses.py

"""
WAREHOUSE REFERENCE DATA

Rules:
- Names are unique, compared case-insensitively.
- A warehouse can only be deleted while nothing depends on it:
  no stock on hand and no receipt / delivery / transfer referencing it.
  Empty (quantity 0) ledger rows and its move history go with it.
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from inventory.models import Warehouse

from .exceptions import (
    DuplicateWarehouseError,
    WarehouseInUseError,
    WarehouseNotFoundError,
)

logger = logging.getLogger(__name__)


def get_warehouse(warehouse_id, *, for_update: bool = False) -> Warehouse:
    qs = Warehouse.objects.all()
    if for_update:
        qs = qs.select_for_update()
    try:
        return qs.get(id=warehouse_id)
    except (Warehouse.DoesNotExist, ValidationError, ValueError, TypeError):
        raise WarehouseNotFoundError(f"Warehouse not found: {warehouse_id}")


@transaction.atomic
def create_warehouse(*, name: str) -> Warehouse:
    name = (name or "").strip()
    if not name:
        raise ValidationError("name is required")

    if Warehouse.objects.filter(name__iexact=name).exists():
        raise DuplicateWarehouseError(f"Warehouse '{name}' already exists")

    try:
        with transaction.atomic():
            warehouse = Warehouse.objects.create(name=name)
    except IntegrityError as exc:
        raise DuplicateWarehouseError(f"Warehouse '{name}' already exists") from exc

    logger.info("Warehouse created", extra={"warehouse_id": str(warehouse.id)})
    return warehouse


def _references(warehouse: Warehouse) -> list[str]:
    refs = []
    if warehouse.stocks.filter(quantity__gt=0).exists():
        refs.append("stock on hand")
    if warehouse.receipts.exists():
        refs.append("receipts")
    if warehouse.delivery_items.exists():
        refs.append("deliveries")
    if warehouse.outgoing_transfers.exists() or warehouse.incoming_transfers.exists():
        refs.append("transfers")
    return refs


@transaction.atomic
def delete_warehouse(*, warehouse_id) -> None:
    warehouse = get_warehouse(warehouse_id, for_update=True)

    refs = _references(warehouse)
    if refs:
        raise WarehouseInUseError(
            f"Warehouse '{warehouse.name}' is still referenced by: {', '.join(refs)}"
        )

    # Empty ledger rows and move history cascade.
    warehouse.delete()

    logger.info("Warehouse deleted", extra={"warehouse_id": str(warehouse_id)})
