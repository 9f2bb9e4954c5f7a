# operations/services/validation.py

"""
PATH: operations/services/validation.py

FULFILMENT VALIDATION (CHECK BEFORE COMMIT)

Given a document, a target status and [{line_id, fulfilled_qty}], decide
whether the transition is feasible. Nothing is written here.

Order of checks:
1) Finalising requires fulfilment data.
2) Every supplied line id must belong to the document.
3) Each quantity is an integer, 0 <= qty <= requested, one entry per line.
4) Where stock leaves a warehouse, the locked ledger quantity minus what
   earlier lines of this call already claim must cover qty.

Lines are checked in document order; the first failure aborts the call.
Must run inside the caller's transaction so the stock locks taken in (4)
hold until the ledger is mutated.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from rest_framework import serializers

from inventory.services import ledger
from inventory.services.exceptions import InsufficientStockError

from .exceptions import (
    InvalidQuantityError,
    MissingFulfillmentDataError,
    UnknownLineItemError,
)
from .kinds import DocumentKind


@dataclass(frozen=True)
class PlannedLine:
    line: object
    qty: int


def _line_id(raw):
    try:
        return uuid.UUID(str(raw))
    except (TypeError, ValueError, AttributeError):
        return None


def _fulfilled_qty(raw, *, label: str) -> int:
    if isinstance(raw, bool) or raw is None:
        raise InvalidQuantityError(f"{label}: fulfilled quantity must be an integer")
    try:
        return serializers.IntegerField().to_internal_value(raw)
    except serializers.ValidationError as exc:
        raise InvalidQuantityError(
            f"{label}: fulfilled quantity must be an integer"
        ) from exc


def _label(line) -> str:
    product = getattr(line, "product", None)
    sku = getattr(product, "sku", None)
    if sku:
        return f"Line {line.position + 1} ({sku})"
    return f"Line {line.position + 1}"


def validate_fulfillment(*, kind: DocumentKind, document, status, items) -> list[PlannedLine]:
    """
    Returns the supplied lines in document order with their parsed quantities.
    """
    if status == kind.final_status and not items:
        raise MissingFulfillmentDataError(
            f"Items with quantities are required to mark a {kind.name} as {status}"
        )

    lines = list(document.items.all())
    by_id = {line.id: line for line in lines}

    supplied = {}
    for entry in items or []:
        raw_id = entry.get("line_id") if isinstance(entry, dict) else None
        line_id = _line_id(raw_id)
        if line_id is None or line_id not in by_id:
            raise UnknownLineItemError(f"{kind.display} item {raw_id} not found")
        if line_id in supplied:
            raise InvalidQuantityError(f"{_label(by_id[line_id])}: supplied more than once")
        supplied[line_id] = entry.get("fulfilled_qty")

    plan = []
    claimed = {}

    for line in lines:
        if line.id not in supplied:
            continue

        label = _label(line)
        qty = _fulfilled_qty(supplied[line.id], label=label)

        if qty < 0:
            raise InvalidQuantityError(f"{label}: fulfilled quantity cannot be negative")
        if qty > line.quantity:
            raise InvalidQuantityError(
                f"{label}: fulfilled quantity {qty} exceeds requested quantity {line.quantity}"
            )

        if qty > 0 and kind.source is not None:
            warehouse_id = kind.source(document, line)
            key = (line.product_id, warehouse_id)

            on_hand = ledger.locked_quantity(
                product_id=line.product_id, warehouse_id=warehouse_id
            )
            available = on_hand - claimed.get(key, 0)

            if available < qty:
                raise InsufficientStockError(
                    f"{label}: insufficient stock, available {available}, requested {qty}",
                    product_id=line.product_id,
                    warehouse_id=warehouse_id,
                    available=available,
                    requested=qty,
                )
            claimed[key] = claimed.get(key, 0) + qty

        plan.append(PlannedLine(line=line, qty=qty))

    return plan
