# operations/models.py

"""
STOCK DOCUMENTS

Three document kinds share one shape: a header with a status plus ordered
line items, each carrying a requested quantity and a fulfilled quantity.

- Receipt:  supplier, single destination warehouse on the header
- Delivery: customer, source warehouse per line
- Transfer: from_warehouse -> to_warehouse (must differ)

Status is one-shot: draft -> validated (receipt, delivery) or
draft -> completed (transfer). Advancing is performed by
operations.services.transitions, which also moves the stock.
"""

import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from inventory.models import Warehouse
from products.models import Product

User = settings.AUTH_USER_MODEL


class DocumentType(models.TextChoices):
    RECEIPT = "receipt", "Receipt"
    DELIVERY = "delivery", "Delivery"
    TRANSFER = "transfer", "Transfer"


class DocumentStatus(models.TextChoices):
    DRAFT = "draft", "Draft"
    VALIDATED = "validated", "Validated"
    COMPLETED = "completed", "Completed"


class StockDocument(models.Model):
    """
    Shared document header.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    status = models.CharField(
        max_length=20,
        choices=DocumentStatus.choices,
        default=DocumentStatus.DRAFT,
    )

    created_by = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="%(class)ss_created",
    )
    processed_by = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="%(class)ss_processed",
    )
    processed_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    @property
    def is_draft(self) -> bool:
        return self.status == DocumentStatus.DRAFT


class DocumentLine(models.Model):
    """
    Shared line item: product + requested quantity, kept in document order.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="%(class)ss",
    )
    quantity = models.PositiveIntegerField()
    position = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ["position", "created_at"]


# ======================================================
# RECEIPTS
# ======================================================

class Receipt(StockDocument):
    supplier = models.CharField(max_length=200)
    warehouse = models.ForeignKey(
        Warehouse,
        on_delete=models.PROTECT,
        related_name="receipts",
    )
    receipt_date = models.DateField(default=timezone.localdate)

    class Meta(StockDocument.Meta):
        constraints = [
            models.CheckConstraint(
                condition=models.Q(status__in=["draft", "validated"]),
                name="receipt_status_valid",
            ),
        ]
        indexes = [
            models.Index(fields=["status", "created_at"], name="receipt_status_created_idx"),
        ]

    def clean(self):
        if not (self.supplier or "").strip():
            raise ValidationError({"supplier": "supplier is required"})

    def save(self, *args, **kwargs):
        if self.supplier is not None:
            self.supplier = self.supplier.strip()
        return super().save(*args, **kwargs)

    def __str__(self):
        return f"Receipt from {self.supplier} ({self.status})"


class ReceiptItem(DocumentLine):
    receipt = models.ForeignKey(
        Receipt,
        on_delete=models.CASCADE,
        related_name="items",
    )
    received_qty = models.PositiveIntegerField(default=0)

    class Meta(DocumentLine.Meta):
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name="receipt_item_quantity_gt_zero",
            ),
            models.CheckConstraint(
                condition=models.Q(received_qty__lte=models.F("quantity")),
                name="receipt_item_received_lte_quantity",
            ),
        ]

    def __str__(self):
        return f"{self.product_id} x {self.quantity} (received {self.received_qty})"


# ======================================================
# DELIVERIES
# ======================================================

class Delivery(StockDocument):
    customer = models.CharField(max_length=200)

    class Meta(StockDocument.Meta):
        verbose_name_plural = "deliveries"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(status__in=["draft", "validated"]),
                name="delivery_status_valid",
            ),
        ]
        indexes = [
            models.Index(fields=["status", "created_at"], name="delivery_status_created_idx"),
        ]

    def clean(self):
        if not (self.customer or "").strip():
            raise ValidationError({"customer": "customer is required"})

    def save(self, *args, **kwargs):
        if self.customer is not None:
            self.customer = self.customer.strip()
        return super().save(*args, **kwargs)

    def __str__(self):
        return f"Delivery to {self.customer} ({self.status})"


class DeliveryItem(DocumentLine):
    delivery = models.ForeignKey(
        Delivery,
        on_delete=models.CASCADE,
        related_name="items",
    )
    # Deliveries pick per line, unlike receipts.
    warehouse = models.ForeignKey(
        Warehouse,
        on_delete=models.PROTECT,
        related_name="delivery_items",
    )
    delivered_qty = models.PositiveIntegerField(default=0)

    class Meta(DocumentLine.Meta):
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name="delivery_item_quantity_gt_zero",
            ),
            models.CheckConstraint(
                condition=models.Q(delivered_qty__lte=models.F("quantity")),
                name="delivery_item_delivered_lte_quantity",
            ),
        ]

    def __str__(self):
        return f"{self.product_id} x {self.quantity} (delivered {self.delivered_qty})"


# ======================================================
# TRANSFERS
# ======================================================

class Transfer(StockDocument):
    from_warehouse = models.ForeignKey(
        Warehouse,
        on_delete=models.PROTECT,
        related_name="outgoing_transfers",
    )
    to_warehouse = models.ForeignKey(
        Warehouse,
        on_delete=models.PROTECT,
        related_name="incoming_transfers",
    )

    class Meta(StockDocument.Meta):
        constraints = [
            models.CheckConstraint(
                condition=models.Q(status__in=["draft", "completed"]),
                name="transfer_status_valid",
            ),
            models.CheckConstraint(
                condition=~models.Q(from_warehouse=models.F("to_warehouse")),
                name="transfer_route_distinct",
            ),
        ]
        indexes = [
            models.Index(fields=["status", "created_at"], name="transfer_status_created_idx"),
        ]

    def clean(self):
        if self.from_warehouse_id and self.from_warehouse_id == self.to_warehouse_id:
            raise ValidationError("from_warehouse and to_warehouse must differ")

    def __str__(self):
        return f"Transfer {self.from_warehouse_id} -> {self.to_warehouse_id} ({self.status})"


class TransferItem(DocumentLine):
    transfer = models.ForeignKey(
        Transfer,
        on_delete=models.CASCADE,
        related_name="items",
    )
    transferred_qty = models.PositiveIntegerField(default=0)

    class Meta(DocumentLine.Meta):
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name="transfer_item_quantity_gt_zero",
            ),
            models.CheckConstraint(
                condition=models.Q(transferred_qty__lte=models.F("quantity")),
                name="transfer_item_transferred_lte_quantity",
            ),
        ]

    def __str__(self):
        return f"{self.product_id} x {self.quantity} (transferred {self.transferred_qty})"
