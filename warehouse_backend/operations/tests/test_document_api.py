# operations/tests/test_document_api.py

from __future__ import annotations

import uuid

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from inventory.models import StockMove, Warehouse
from inventory.services import ledger
from operations.models import Delivery, Receipt, Transfer
from products.models import Product

User = get_user_model()


class DocumentApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="staff@example.com", password="pass1234")
        self.client.force_authenticate(self.user)

        self.product = Product.objects.create(sku="BOLT-M8", name="Bolt", uom="pcs")
        self.wh_a = Warehouse.objects.create(name="A")
        self.wh_b = Warehouse.objects.create(name="B")

    def qty(self, warehouse):
        return ledger.get_quantity(product_id=self.product.id, warehouse_id=warehouse.id)

    def seed(self, warehouse, amount):
        ledger.increment(
            product_id=self.product.id,
            warehouse_id=warehouse.id,
            amount=amount,
            reason=StockMove.Reason.INITIAL,
        )


class ReceiptApiTests(DocumentApiTestCase):
    def setUp(self):
        super().setUp()
        self.url = reverse("receipt")

    def _create(self, quantity=10):
        return self.client.post(
            self.url,
            {
                "supplier": "Acme",
                "warehouse_id": str(self.wh_a.id),
                "items": [{"product_id": str(self.product.id), "quantity": quantity}],
            },
        )

    def test_create_then_validate(self):
        created = self._create()
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        self.assertEqual(created.data["status"], "draft")
        self.assertEqual(created.data["warehouse_name"], "A")
        line = created.data["items"][0]
        self.assertEqual(line["received_qty"], 0)
        self.assertEqual(line["product_sku"], "BOLT-M8")

        response = self.client.patch(
            self.url,
            {
                "receipt_id": created.data["id"],
                "status": "validated",
                "items": [{"receipt_item_id": line["id"], "received_qty": 10}],
            },
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "validated")
        self.assertEqual(response.data["items"][0]["received_qty"], 10)
        self.assertEqual(response.data["processed_by_email"], "staff@example.com")
        self.assertEqual(self.qty(self.wh_a), 10)

    def test_validate_without_items_is_400(self):
        created = self._create()

        response = self.client.patch(
            self.url, {"receipt_id": created.data["id"], "status": "validated"}
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("required", response.data["detail"])

    def test_unknown_line_is_404(self):
        created = self._create()

        response = self.client.patch(
            self.url,
            {
                "receipt_id": created.data["id"],
                "status": "validated",
                "items": [{"receipt_item_id": str(uuid.uuid4()), "received_qty": 1}],
            },
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.qty(self.wh_a), 0)

    def test_malformed_received_qty_is_400(self):
        created = self._create()
        line_id = created.data["items"][0]["id"]

        for bad in ("--1", "²"):
            with self.subTest(received_qty=bad):
                response = self.client.patch(
                    self.url,
                    {
                        "receipt_id": created.data["id"],
                        "status": "validated",
                        "items": [{"receipt_item_id": line_id, "received_qty": bad}],
                    },
                    format="json",
                )

                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertIn("Line 1 (BOLT-M8)", response.data["detail"])

        self.assertEqual(self.qty(self.wh_a), 0)
        self.assertEqual(Receipt.objects.get(id=created.data["id"]).status, "draft")

    def test_unknown_receipt_is_404(self):
        response = self.client.patch(
            self.url, {"receipt_id": str(uuid.uuid4()), "status": "validated", "items": []}
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_revalidation_is_400(self):
        created = self._create()
        line_id = created.data["items"][0]["id"]
        payload = {
            "receipt_id": created.data["id"],
            "status": "validated",
            "items": [{"receipt_item_id": line_id, "received_qty": 10}],
        }

        self.assertEqual(self.client.patch(self.url, payload).status_code, status.HTTP_200_OK)
        second = self.client.patch(self.url, payload)

        self.assertEqual(second.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(self.qty(self.wh_a), 10)

    def test_create_with_unknown_warehouse_is_404(self):
        response = self.client.post(
            self.url,
            {
                "supplier": "Acme",
                "warehouse_id": str(uuid.uuid4()),
                "items": [{"product_id": str(self.product.id), "quantity": 1}],
            },
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(Receipt.objects.exists())

    def test_create_without_items_is_400(self):
        response = self.client.post(
            self.url, {"supplier": "Acme", "warehouse_id": str(self.wh_a.id), "items": []}
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_list_filter_and_single_fetch(self):
        first = self._create().data
        self._create()
        self.client.patch(
            self.url,
            {
                "receipt_id": first["id"],
                "status": "validated",
                "items": [{"receipt_item_id": first["items"][0]["id"], "received_qty": 1}],
            },
        )

        listed = self.client.get(self.url)
        self.assertEqual(listed.status_code, status.HTTP_200_OK)
        self.assertEqual(len(listed.data), 2)

        validated = self.client.get(self.url, {"status": "validated"})
        self.assertEqual([r["id"] for r in validated.data], [first["id"]])

        single = self.client.get(self.url, {"id": first["id"]})
        self.assertEqual(single.status_code, status.HTTP_200_OK)
        self.assertEqual(single.data["id"], first["id"])

        missing = self.client.get(self.url, {"id": str(uuid.uuid4())})
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)

    def test_requires_authentication(self):
        client = APIClient()
        self.assertEqual(client.get(self.url).status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(client.post(self.url, {}).status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(client.patch(self.url, {}).status_code, status.HTTP_401_UNAUTHORIZED)


class DeliveryApiTests(DocumentApiTestCase):
    def setUp(self):
        super().setUp()
        self.url = reverse("delivery")

    def _create(self, quantity=5):
        return self.client.post(
            self.url,
            {
                "customer": "Bob",
                "items": [
                    {
                        "product_id": str(self.product.id),
                        "warehouse_id": str(self.wh_a.id),
                        "quantity": quantity,
                    }
                ],
            },
        )

    def _validate(self, created, delivered):
        return self.client.patch(
            self.url,
            {
                "delivery_id": created.data["id"],
                "status": "validated",
                "items": [
                    {"delivery_item_id": created.data["items"][0]["id"], "delivered_qty": delivered}
                ],
            },
        )

    def test_validate_delivery(self):
        self.seed(self.wh_a, 5)
        created = self._create()
        self.assertEqual(created.data["items"][0]["warehouse_name"], "A")

        response = self._validate(created, 5)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "validated")
        self.assertEqual(self.qty(self.wh_a), 0)

    def test_over_requested_quantity_is_400(self):
        self.seed(self.wh_a, 5)
        created = self._create()

        response = self._validate(created, 6)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("exceeds requested quantity", response.data["detail"])
        self.assertEqual(self.qty(self.wh_a), 5)
        self.assertEqual(Delivery.objects.get().status, "draft")

    def test_insufficient_stock_is_400(self):
        self.seed(self.wh_a, 2)
        created = self._create()

        response = self._validate(created, 3)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("insufficient stock", response.data["detail"])
        self.assertIn("BOLT-M8", response.data["detail"])
        self.assertEqual(self.qty(self.wh_a), 2)


class TransferApiTests(DocumentApiTestCase):
    def setUp(self):
        super().setUp()
        self.url = reverse("transfer")

    def test_complete_transfer(self):
        self.seed(self.wh_a, 10)
        created = self.client.post(
            self.url,
            {
                "from_warehouse_id": str(self.wh_a.id),
                "to_warehouse_id": str(self.wh_b.id),
                "items": [{"product_id": str(self.product.id), "quantity": 10}],
            },
        )
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        self.assertEqual(created.data["from_warehouse_name"], "A")
        self.assertEqual(created.data["to_warehouse_name"], "B")

        response = self.client.patch(
            self.url,
            {
                "transfer_id": created.data["id"],
                "status": "completed",
                "items": [
                    {"transfer_item_id": created.data["items"][0]["id"], "transferred_qty": 10}
                ],
            },
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "completed")
        self.assertEqual(self.qty(self.wh_a), 0)
        self.assertEqual(self.qty(self.wh_b), 10)

    def test_same_warehouse_is_400_and_creates_nothing(self):
        response = self.client.post(
            self.url,
            {
                "from_warehouse_id": str(self.wh_a.id),
                "to_warehouse_id": str(self.wh_a.id),
                "items": [{"product_id": str(self.product.id), "quantity": 1}],
            },
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("must be different", response.data["detail"])
        self.assertFalse(Transfer.objects.exists())
