# inventory/models/stock.py

"""
STOCK LEDGER ENTRY

One row per (product, warehouse).

GUARANTEES:
- quantity is a non-negative integer (field + DB check constraint)
- (product, warehouse) is unique: a concurrent first insert loses on the constraint
- rows are materialised on first write only; "no row" reads as 0

quantity is service-managed: write it through inventory.services.ledger only.
"""

import uuid

from django.db import models

from products.models import Product

from .warehouse import Warehouse


class Stock(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name="stocks",
    )
    warehouse = models.ForeignKey(
        Warehouse,
        on_delete=models.CASCADE,
        related_name="stocks",
    )

    quantity = models.PositiveIntegerField(default=0)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["warehouse__name"]
        constraints = [
            models.UniqueConstraint(
                fields=["product", "warehouse"],
                name="uniq_stock_product_warehouse",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0),
                name="stock_quantity_nonnegative",
            ),
        ]

    def __str__(self):
        return f"{self.product_id} @ {self.warehouse_id}: {self.quantity}"
