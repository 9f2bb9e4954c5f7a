import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

STATUS_CHOICES = [
    ("draft", "Draft"),
    ("validated", "Validated"),
    ("completed", "Completed"),
]


def _header_fields(model_name):
    return [
        (
            "id",
            models.UUIDField(
                default=uuid.uuid4, editable=False, primary_key=True, serialize=False
            ),
        ),
        (
            "status",
            models.CharField(choices=STATUS_CHOICES, default="draft", max_length=20),
        ),
        ("processed_at", models.DateTimeField(blank=True, null=True)),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
        (
            "created_by",
            models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name=f"{model_name}s_created",
                to=settings.AUTH_USER_MODEL,
            ),
        ),
        (
            "processed_by",
            models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name=f"{model_name}s_processed",
                to=settings.AUTH_USER_MODEL,
            ),
        ),
    ]


def _line_fields(model_name):
    return [
        (
            "id",
            models.UUIDField(
                default=uuid.uuid4, editable=False, primary_key=True, serialize=False
            ),
        ),
        ("quantity", models.PositiveIntegerField()),
        ("position", models.PositiveIntegerField(default=0)),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        (
            "product",
            models.ForeignKey(
                on_delete=django.db.models.deletion.PROTECT,
                related_name=f"{model_name}s",
                to="products.product",
            ),
        ),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("inventory", "0001_initial"),
        ("products", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Receipt",
            fields=_header_fields("receipt")
            + [
                ("supplier", models.CharField(max_length=200)),
                ("receipt_date", models.DateField(default=django.utils.timezone.localdate)),
                (
                    "warehouse",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="receipts",
                        to="inventory.warehouse",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("status__in", ["draft", "validated"])),
                        name="receipt_status_valid",
                    ),
                ],
                "indexes": [
                    models.Index(
                        fields=["status", "created_at"], name="receipt_status_created_idx"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="ReceiptItem",
            fields=_line_fields("receiptitem")
            + [
                ("received_qty", models.PositiveIntegerField(default=0)),
                (
                    "receipt",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="operations.receipt",
                    ),
                ),
            ],
            options={
                "ordering": ["position", "created_at"],
                "abstract": False,
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("quantity__gt", 0)),
                        name="receipt_item_quantity_gt_zero",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("received_qty__lte", models.F("quantity"))),
                        name="receipt_item_received_lte_quantity",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Delivery",
            fields=_header_fields("delivery")
            + [
                ("customer", models.CharField(max_length=200)),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
                "verbose_name_plural": "deliveries",
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("status__in", ["draft", "validated"])),
                        name="delivery_status_valid",
                    ),
                ],
                "indexes": [
                    models.Index(
                        fields=["status", "created_at"], name="delivery_status_created_idx"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="DeliveryItem",
            fields=_line_fields("deliveryitem")
            + [
                ("delivered_qty", models.PositiveIntegerField(default=0)),
                (
                    "delivery",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="operations.delivery",
                    ),
                ),
                (
                    "warehouse",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="delivery_items",
                        to="inventory.warehouse",
                    ),
                ),
            ],
            options={
                "ordering": ["position", "created_at"],
                "abstract": False,
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("quantity__gt", 0)),
                        name="delivery_item_quantity_gt_zero",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("delivered_qty__lte", models.F("quantity"))),
                        name="delivery_item_delivered_lte_quantity",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Transfer",
            fields=_header_fields("transfer")
            + [
                (
                    "from_warehouse",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="outgoing_transfers",
                        to="inventory.warehouse",
                    ),
                ),
                (
                    "to_warehouse",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="incoming_transfers",
                        to="inventory.warehouse",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("status__in", ["draft", "completed"])),
                        name="transfer_status_valid",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            ("from_warehouse", models.F("to_warehouse")), _negated=True
                        ),
                        name="transfer_route_distinct",
                    ),
                ],
                "indexes": [
                    models.Index(
                        fields=["status", "created_at"], name="transfer_status_created_idx"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="TransferItem",
            fields=_line_fields("transferitem")
            + [
                ("transferred_qty", models.PositiveIntegerField(default=0)),
                (
                    "transfer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="operations.transfer",
                    ),
                ),
            ],
            options={
                "ordering": ["position", "created_at"],
                "abstract": False,
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("quantity__gt", 0)),
                        name="transfer_item_quantity_gt_zero",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            ("transferred_qty__lte", models.F("quantity"))
                        ),
                        name="transfer_item_transferred_lte_quantity",
                    ),
                ],
            },
        ),
    ]
