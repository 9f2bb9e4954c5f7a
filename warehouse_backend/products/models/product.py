# products/models/product.py

import uuid

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Sum

from .category import Category


class Product(models.Model):
    """
    A stockable item.

    STOCK MODEL (IMPORTANT):
    - Product itself does NOT store stock
    - Stock lives in inventory.Stock, one row per (product, warehouse)
    - Total stock = sum of those rows

    SKU is the business key: unique and fixed once the product exists.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )

    sku = models.CharField(max_length=64, unique=True, db_index=True)
    name = models.CharField(max_length=255, db_index=True)
    uom = models.CharField(max_length=32, help_text="Unit of measure, e.g. pcs, kg, box.")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.sku})"

    def clean(self):
        if not (self.sku or "").strip():
            raise ValidationError({"sku": "sku is required"})
        if not (self.name or "").strip():
            raise ValidationError({"name": "name is required"})
        if not (self.uom or "").strip():
            raise ValidationError({"uom": "uom is required"})

    def save(self, *args, **kwargs):
        for field in ("sku", "name", "uom"):
            value = getattr(self, field)
            if value is not None:
                setattr(self, field, value.strip())
        return super().save(*args, **kwargs)

    @property
    def total_stock_db(self) -> int:
        return self.stocks.aggregate(total=Sum("quantity")).get("total") or 0
