# operations/services/documents.py

"""
PATH: operations/services/documents.py

DOCUMENT CREATION + READS

Rules:
- New documents start in draft; every line starts with fulfilled qty 0.
- Lines keep payload order (position 0..n-1).
- Referenced warehouses and products must exist.
- A transfer whose source and destination are the same warehouse is
  rejected before anything is written.
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from rest_framework import serializers

from inventory.services.warehouses import get_warehouse
from operations.models import (
    Delivery,
    DeliveryItem,
    Receipt,
    ReceiptItem,
    Transfer,
    TransferItem,
)
from products.services.catalog import get_product

from .exceptions import (
    DocumentNotFoundError,
    InvalidQuantityError,
    InvalidTransferRouteError,
)
from .kinds import DELIVERY, RECEIPT, TRANSFER, DocumentKind

logger = logging.getLogger(__name__)


def _requested_qty(value, *, position: int) -> int:
    if isinstance(value, bool) or value is None:
        raise InvalidQuantityError(f"Line {position + 1}: quantity must be an integer")
    try:
        qty = serializers.IntegerField().to_internal_value(value)
    except serializers.ValidationError as exc:
        raise InvalidQuantityError(
            f"Line {position + 1}: quantity must be an integer"
        ) from exc
    if qty <= 0:
        raise InvalidQuantityError(f"Line {position + 1}: quantity must be greater than zero")
    return qty


def _require_items(items):
    if not items:
        raise ValidationError("At least one line item is required")


def _log_created(kind: DocumentKind, document, user):
    logger.info(
        "Document created",
        extra={
            "kind": kind.name,
            "document_id": str(document.id),
            "lines": document.items.count(),
            "user_id": str(getattr(user, "id", "") or ""),
        },
    )


@transaction.atomic
def create_receipt(*, supplier: str, warehouse_id, items, receipt_date=None, user=None) -> Receipt:
    _require_items(items)
    warehouse = get_warehouse(warehouse_id)

    lines = [
        (get_product(item.get("product_id")), _requested_qty(item.get("quantity"), position=i))
        for i, item in enumerate(items)
    ]

    receipt = Receipt(supplier=supplier, warehouse=warehouse, created_by=user)
    if receipt_date:
        receipt.receipt_date = receipt_date
    receipt.full_clean()
    receipt.save()

    ReceiptItem.objects.bulk_create(
        [
            ReceiptItem(receipt=receipt, product=product, quantity=qty, position=i)
            for i, (product, qty) in enumerate(lines)
        ]
    )

    _log_created(RECEIPT, receipt, user)
    return receipt


@transaction.atomic
def create_delivery(*, customer: str, items, user=None) -> Delivery:
    _require_items(items)

    lines = [
        (
            get_product(item.get("product_id")),
            get_warehouse(item.get("warehouse_id")),
            _requested_qty(item.get("quantity"), position=i),
        )
        for i, item in enumerate(items)
    ]

    delivery = Delivery(customer=customer, created_by=user)
    delivery.full_clean()
    delivery.save()

    DeliveryItem.objects.bulk_create(
        [
            DeliveryItem(
                delivery=delivery,
                product=product,
                warehouse=warehouse,
                quantity=qty,
                position=i,
            )
            for i, (product, warehouse, qty) in enumerate(lines)
        ]
    )

    _log_created(DELIVERY, delivery, user)
    return delivery


@transaction.atomic
def create_transfer(*, from_warehouse_id, to_warehouse_id, items, user=None) -> Transfer:
    if from_warehouse_id and str(from_warehouse_id) == str(to_warehouse_id):
        raise InvalidTransferRouteError("Source and destination warehouses must be different")

    _require_items(items)
    from_warehouse = get_warehouse(from_warehouse_id)
    to_warehouse = get_warehouse(to_warehouse_id)

    # Same warehouse given in two spellings (e.g. UUID case).
    if from_warehouse.id == to_warehouse.id:
        raise InvalidTransferRouteError("Source and destination warehouses must be different")

    lines = [
        (get_product(item.get("product_id")), _requested_qty(item.get("quantity"), position=i))
        for i, item in enumerate(items)
    ]

    transfer = Transfer.objects.create(
        from_warehouse=from_warehouse,
        to_warehouse=to_warehouse,
        created_by=user,
    )

    TransferItem.objects.bulk_create(
        [
            TransferItem(transfer=transfer, product=product, quantity=qty, position=i)
            for i, (product, qty) in enumerate(lines)
        ]
    )

    _log_created(TRANSFER, transfer, user)
    return transfer


def get_document(kind: DocumentKind, document_id):
    try:
        return kind.queryset().get(id=document_id)
    except (kind.model.DoesNotExist, ValidationError, ValueError, TypeError):
        raise DocumentNotFoundError(f"{kind.display} not found: {document_id}")


def list_documents(kind: DocumentKind, *, status=None):
    qs = kind.queryset().order_by("-created_at")
    if status:
        qs = qs.filter(status=status)
    return qs
