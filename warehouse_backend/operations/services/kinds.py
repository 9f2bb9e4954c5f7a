# operations/services/kinds.py

"""
PATH: operations/services/kinds.py

DOCUMENT KINDS (STRATEGY REGISTRY)

One entry per document type, describing everything the shared workflow
needs to know:
- which models hold the header and the lines
- which status finalises the document
- where stock leaves (source) and where it arrives (destination)
- how lines and fulfilled quantities are named on the wire

The orchestrator (transitions.py) and validation engine (validation.py)
never branch on the document type; they ask the kind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from django.db.models import Prefetch

from inventory.models import StockMove
from operations.models import (
    Delivery,
    DeliveryItem,
    DocumentStatus,
    DocumentType,
    Receipt,
    ReceiptItem,
    Transfer,
    TransferItem,
)

WarehouseOf = Callable[[object, object], Optional[object]]


@dataclass(frozen=True)
class DocumentKind:
    name: str
    model: type
    item_model: type
    final_status: str
    fulfilled_field: str
    id_key: str
    line_key: str
    move_reason: str
    source: Optional[WarehouseOf] = None
    destination: Optional[WarehouseOf] = None
    header_related: tuple = ()
    item_related: tuple = ("product", "product__category")
    label: str = field(default="")

    @property
    def statuses(self) -> frozenset:
        return frozenset({DocumentStatus.DRAFT.value, self.final_status})

    @property
    def display(self) -> str:
        return self.label or self.name.capitalize()

    def queryset(self):
        items = self.item_model.objects.select_related(*self.item_related).order_by(
            "position", "created_at"
        )
        return self.model.objects.select_related(*self.header_related).prefetch_related(
            Prefetch("items", queryset=items)
        )


RECEIPT = DocumentKind(
    name=DocumentType.RECEIPT,
    model=Receipt,
    item_model=ReceiptItem,
    final_status=DocumentStatus.VALIDATED,
    fulfilled_field="received_qty",
    id_key="receipt_id",
    line_key="receipt_item_id",
    move_reason=StockMove.Reason.RECEIPT,
    destination=lambda doc, line: doc.warehouse_id,
    header_related=("warehouse", "created_by", "processed_by"),
    label="Receipt",
)

DELIVERY = DocumentKind(
    name=DocumentType.DELIVERY,
    model=Delivery,
    item_model=DeliveryItem,
    final_status=DocumentStatus.VALIDATED,
    fulfilled_field="delivered_qty",
    id_key="delivery_id",
    line_key="delivery_item_id",
    move_reason=StockMove.Reason.DELIVERY,
    source=lambda doc, line: line.warehouse_id,
    header_related=("created_by", "processed_by"),
    item_related=("product", "product__category", "warehouse"),
    label="Delivery",
)

TRANSFER = DocumentKind(
    name=DocumentType.TRANSFER,
    model=Transfer,
    item_model=TransferItem,
    final_status=DocumentStatus.COMPLETED,
    fulfilled_field="transferred_qty",
    id_key="transfer_id",
    line_key="transfer_item_id",
    move_reason=StockMove.Reason.TRANSFER,
    source=lambda doc, line: doc.from_warehouse_id,
    destination=lambda doc, line: doc.to_warehouse_id,
    header_related=("from_warehouse", "to_warehouse", "created_by", "processed_by"),
    label="Transfer",
)
