# inventory/models/warehouse.py

import uuid

from django.core.exceptions import ValidationError
from django.db import models


class Warehouse(models.Model):
    """
    A physical stock location.

    Deletion is service-managed (inventory.services.warehouses.delete_warehouse):
    documents reference warehouses with PROTECT, and on-hand stock blocks deletion.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=120, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def clean(self):
        if not (self.name or "").strip():
            raise ValidationError({"name": "name is required"})

    def save(self, *args, **kwargs):
        if self.name is not None:
            self.name = self.name.strip()
        return super().save(*args, **kwargs)

    def __str__(self):
        return self.name
