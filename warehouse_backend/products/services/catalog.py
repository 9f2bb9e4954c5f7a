# products/services/catalog.py

"""
PATH: products/services/catalog.py

PRODUCT CATALOG (APPLICATION SERVICE)

Purpose:
- Add / edit / delete products.
- Resolve categories by name, creating them on first use.
- Seed initial stock through the ledger (recorded as an "initial" move).

Rules:
- SKU is unique and cannot change after creation.
- A product without a category lands in "Uncategorized".
- Deleting a product removes its document line items, ledger rows and move
  history in the same transaction.
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from inventory.models import StockMove
from inventory.services import ledger
from inventory.services.warehouses import get_warehouse
from operations.models import DeliveryItem, ReceiptItem, TransferItem
from products.models import DEFAULT_CATEGORY_NAME, Category, Product

from .exceptions import DuplicateSkuError, ImmutableSkuError, ProductNotFoundError

logger = logging.getLogger(__name__)


def resolve_category(name: str | None) -> Category:
    name = (name or "").strip() or DEFAULT_CATEGORY_NAME

    category = Category.objects.filter(name__iexact=name).first()
    if category is not None:
        return category

    try:
        with transaction.atomic():
            return Category.objects.create(name=name)
    except IntegrityError:
        return Category.objects.get(name__iexact=name)


def get_product(product_id, *, for_update: bool = False) -> Product:
    # No joins under FOR UPDATE: category is a nullable FK.
    qs = Product.objects.select_for_update() if for_update else Product.objects.select_related("category")
    try:
        return qs.get(id=product_id)
    except (Product.DoesNotExist, ValidationError, ValueError, TypeError):
        raise ProductNotFoundError(f"Product not found: {product_id}")


@transaction.atomic
def add_product(
    *,
    sku: str,
    name: str,
    uom: str,
    category: str | None = None,
    quantity: int = 0,
    warehouse_id=None,
    user=None,
) -> Product:
    sku = (sku or "").strip()

    if Product.objects.filter(sku=sku).exists():
        raise DuplicateSkuError(f"SKU '{sku}' already exists")

    warehouse = None
    if quantity and quantity > 0:
        if not warehouse_id:
            raise ValidationError("warehouse_id is required when quantity is given")
        warehouse = get_warehouse(warehouse_id)

    product = Product(
        sku=sku,
        name=name,
        uom=uom,
        category=resolve_category(category),
    )
    product.full_clean(exclude=["category", "sku"])

    try:
        with transaction.atomic():
            product.save()
    except IntegrityError as exc:
        raise DuplicateSkuError(f"SKU '{sku}' already exists") from exc

    if warehouse is not None:
        ledger.increment(
            product_id=product.id,
            warehouse_id=warehouse.id,
            amount=int(quantity),
            reason=StockMove.Reason.INITIAL,
            user=user,
        )

    logger.info(
        "Product created",
        extra={"product_id": str(product.id), "sku": product.sku},
    )
    return product


@transaction.atomic
def update_product(
    *,
    product_id,
    sku: str | None = None,
    name: str | None = None,
    uom: str | None = None,
    category: str | None = None,
) -> Product:
    """
    Partial edit. Omitted (None) fields are left untouched.
    Resending the current SKU is accepted; a different one is not.
    """
    product = get_product(product_id, for_update=True)

    if sku is not None and sku.strip() and sku.strip() != product.sku:
        raise ImmutableSkuError("SKU cannot be changed once the product exists")

    if name is not None and name.strip():
        product.name = name
    if uom is not None and uom.strip():
        product.uom = uom
    if category is not None and category.strip():
        product.category = resolve_category(category)

    product.full_clean(exclude=["category", "sku"])
    product.save()

    logger.info("Product updated", extra={"product_id": str(product.id)})
    return product


@transaction.atomic
def delete_product(*, product_id) -> None:
    product = get_product(product_id, for_update=True)

    # Line items PROTECT their product; remove them first.
    ReceiptItem.objects.filter(product=product).delete()
    DeliveryItem.objects.filter(product=product).delete()
    TransferItem.objects.filter(product=product).delete()

    # Stock rows and move history cascade.
    product.delete()

    logger.info("Product deleted", extra={"product_id": str(product_id)})
