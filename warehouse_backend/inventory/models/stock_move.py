# inventory/models/stock_move.py

"""
STOCK MOVE HISTORY

Immutable record of one ledger mutation.

GUARANTEES:
- Append-only (no updates, no instance deletes)
- Direction validated against reason
- Document-driven moves reference their document
"""

import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from products.models import Product

from .warehouse import Warehouse


class StockMove(models.Model):
    class Direction(models.TextChoices):
        IN = "IN", "Stock In"
        OUT = "OUT", "Stock Out"

    class Reason(models.TextChoices):
        RECEIPT = "receipt", "Receipt"
        DELIVERY = "delivery", "Delivery"
        TRANSFER = "transfer", "Internal Transfer"
        INITIAL = "initial", "Initial Stock"

    REASON_TO_DIRECTION = {
        Reason.RECEIPT: Direction.IN,
        Reason.DELIVERY: Direction.OUT,
        Reason.INITIAL: Direction.IN,
        Reason.TRANSFER: None,
    }

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    product = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="stock_moves"
    )
    warehouse = models.ForeignKey(
        Warehouse, on_delete=models.CASCADE, related_name="stock_moves"
    )

    direction = models.CharField(max_length=3, choices=Direction.choices)
    reason = models.CharField(max_length=20, choices=Reason.choices)

    quantity = models.PositiveIntegerField()

    # Document that caused the move (receipt / delivery / transfer id).
    reference_id = models.UUIDField(null=True, blank=True, db_index=True)

    performed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="stock_moves",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["reason", "created_at"], name="stockmove_reason_created_idx"),
            models.Index(fields=["product", "created_at"], name="stockmove_product_created_idx"),
            models.Index(fields=["warehouse", "created_at"], name="stockmove_wh_created_idx"),
        ]

    def clean(self):
        if not self.quantity or self.quantity <= 0:
            raise ValidationError("quantity must be greater than zero")

        expected = self.REASON_TO_DIRECTION.get(self.reason)
        if expected and self.direction != expected:
            raise ValidationError(f"{self.reason} requires direction={expected}")

        if self.reason != self.Reason.INITIAL and not self.reference_id:
            raise ValidationError(f"{self.reason} moves must reference a document")

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("StockMove records are immutable")
        self.full_clean()
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("StockMove records are immutable and cannot be deleted")

    def __str__(self):
        return f"{self.reason} {self.direction} {self.quantity}"
