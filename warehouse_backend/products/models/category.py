# products/models/category.py

import uuid

from django.db import models

DEFAULT_CATEGORY_NAME = "Uncategorized"


class Category(models.Model):
    """
    Product grouping.

    Categories are never managed directly: product add/update flows resolve a
    category by name (case-insensitive) and create it on first use.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def save(self, *args, **kwargs):
        if self.name is not None:
            self.name = self.name.strip()
        return super().save(*args, **kwargs)

    def __str__(self):
        return self.name
