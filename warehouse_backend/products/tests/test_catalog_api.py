# products/tests/test_catalog_api.py

from __future__ import annotations

import uuid

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from inventory.models import Stock, StockMove, Warehouse
from inventory.services import ledger
from operations.models import Delivery, DeliveryItem, Receipt, ReceiptItem
from products.models import DEFAULT_CATEGORY_NAME, Category, Product

User = get_user_model()


class ProductApiTests(TestCase):
    """
    GUARANTEES:
    - Every endpoint requires authentication
    - SKU is unique and immutable
    - Initial stock goes through the ledger (with an "initial" move)
    - Delete removes every reference to the product atomically
    """

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="staff@example.com", password="pass1234")
        self.client.force_authenticate(self.user)

        self.warehouse = Warehouse.objects.create(name="Main")

        self.list_url = reverse("product")
        self.add_url = reverse("product-add")
        self.update_url = reverse("product-update")

    def _add(self, **overrides):
        payload = {"sku": "BOLT-M8", "name": "Steel Bolt M8", "uom": "pcs"}
        payload.update(overrides)
        return self.client.post(self.add_url, payload)

    # --------------------------------------------------
    # ADD
    # --------------------------------------------------

    def test_add_product_defaults_category(self):
        response = self._add()

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["sku"], "BOLT-M8")
        self.assertEqual(response.data["category_name"], DEFAULT_CATEGORY_NAME)
        self.assertEqual(response.data["total_stock"], 0)
        self.assertEqual(response.data["stocks"], [])

    def test_add_product_reuses_category_case_insensitively(self):
        Category.objects.create(name="Fasteners")

        response = self._add(category="FASTENERS")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["category_name"], "Fasteners")
        self.assertEqual(Category.objects.filter(name__iexact="fasteners").count(), 1)

    def test_add_product_with_initial_stock(self):
        response = self._add(quantity=25, warehouse_id=str(self.warehouse.id))

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["total_stock"], 25)
        self.assertEqual(response.data["stocks"][0]["warehouse_name"], "Main")

        product = Product.objects.get(sku="BOLT-M8")
        self.assertEqual(
            ledger.get_quantity(product_id=product.id, warehouse_id=self.warehouse.id), 25
        )
        move = StockMove.objects.get(product=product)
        self.assertEqual(move.reason, StockMove.Reason.INITIAL)
        self.assertEqual(move.direction, StockMove.Direction.IN)
        self.assertEqual(move.performed_by, self.user)

    def test_initial_stock_requires_warehouse(self):
        response = self._add(quantity=5)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Product.objects.exists())

    def test_initial_stock_unknown_warehouse_is_404(self):
        response = self._add(quantity=5, warehouse_id=str(uuid.uuid4()))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(Product.objects.exists())

    def test_duplicate_sku_is_rejected(self):
        self._add()

        response = self._add(name="Another bolt")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("already exists", response.data["detail"])
        self.assertEqual(Product.objects.count(), 1)

    def test_missing_required_fields(self):
        response = self.client.post(self.add_url, {"sku": "X-1"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    # --------------------------------------------------
    # LIST
    # --------------------------------------------------

    def test_list_includes_per_warehouse_stock(self):
        self._add(quantity=7, warehouse_id=str(self.warehouse.id))
        other = Warehouse.objects.create(name="Overflow")
        product = Product.objects.get(sku="BOLT-M8")
        ledger.increment(
            product_id=product.id,
            warehouse_id=other.id,
            amount=3,
            reason=StockMove.Reason.INITIAL,
        )

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["total_stock"], 10)
        by_name = {s["warehouse_name"]: s["quantity"] for s in response.data[0]["stocks"]}
        self.assertEqual(by_name, {"Main": 7, "Overflow": 3})

    def test_list_requires_authentication(self):
        response = APIClient().get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    # --------------------------------------------------
    # UPDATE
    # --------------------------------------------------

    def test_update_name_uom_and_category(self):
        product_id = self._add().data["id"]

        response = self.client.put(
            self.update_url,
            {"id": product_id, "name": "Bolt M8 zinc", "uom": "box", "category": "Hardware"},
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "Bolt M8 zinc")
        self.assertEqual(response.data["uom"], "box")
        self.assertEqual(response.data["category_name"], "Hardware")

    def test_update_with_same_sku_is_allowed(self):
        product_id = self._add().data["id"]

        response = self.client.put(self.update_url, {"id": product_id, "sku": "BOLT-M8", "name": "Renamed"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "Renamed")

    def test_update_cannot_change_sku(self):
        product_id = self._add().data["id"]

        response = self.client.put(self.update_url, {"id": product_id, "sku": "BOLT-M10"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Product.objects.get(id=product_id).sku, "BOLT-M8")

    def test_update_unknown_product_is_404(self):
        response = self.client.put(self.update_url, {"id": str(uuid.uuid4()), "name": "Nope"})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    # --------------------------------------------------
    # DELETE
    # --------------------------------------------------

    def test_delete_removes_stock_moves_and_line_items(self):
        product_id = self._add(quantity=5, warehouse_id=str(self.warehouse.id)).data["id"]
        product = Product.objects.get(id=product_id)

        receipt = Receipt.objects.create(supplier="Acme", warehouse=self.warehouse)
        ReceiptItem.objects.create(receipt=receipt, product=product, quantity=3)
        delivery = Delivery.objects.create(customer="Bob")
        DeliveryItem.objects.create(
            delivery=delivery, product=product, warehouse=self.warehouse, quantity=1
        )

        response = self.client.delete(f"{self.list_url}?id={product_id}")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Product.objects.filter(id=product_id).exists())
        self.assertFalse(Stock.objects.filter(product_id=product_id).exists())
        self.assertFalse(StockMove.objects.filter(product_id=product_id).exists())
        self.assertFalse(ReceiptItem.objects.filter(product_id=product_id).exists())
        self.assertFalse(DeliveryItem.objects.filter(product_id=product_id).exists())
        # Document headers survive; only their lines for this product go.
        self.assertTrue(Receipt.objects.filter(id=receipt.id).exists())

    def test_delete_requires_id(self):
        response = self.client.delete(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_delete_unknown_product_is_404(self):
        response = self.client.delete(f"{self.list_url}?id={uuid.uuid4()}")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
