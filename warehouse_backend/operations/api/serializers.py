# operations/api/serializers.py

from rest_framework import serializers

from operations.models import (
    Delivery,
    DeliveryItem,
    Receipt,
    ReceiptItem,
    Transfer,
    TransferItem,
)


# ======================================================
# OUTPUT
# ======================================================

class _LineSerializer(serializers.ModelSerializer):
    product_sku = serializers.CharField(source="product.sku", read_only=True)
    product_name = serializers.CharField(source="product.name", read_only=True)
    uom = serializers.CharField(source="product.uom", read_only=True)
    category_name = serializers.CharField(
        source="product.category.name", read_only=True, default=None
    )

    LINE_FIELDS = [
        "id",
        "position",
        "product",
        "product_sku",
        "product_name",
        "uom",
        "category_name",
        "quantity",
    ]


class ReceiptItemSerializer(_LineSerializer):
    class Meta:
        model = ReceiptItem
        fields = _LineSerializer.LINE_FIELDS + ["received_qty"]
        read_only_fields = fields


class DeliveryItemSerializer(_LineSerializer):
    warehouse_name = serializers.CharField(source="warehouse.name", read_only=True)

    class Meta:
        model = DeliveryItem
        fields = _LineSerializer.LINE_FIELDS + ["warehouse", "warehouse_name", "delivered_qty"]
        read_only_fields = fields


class TransferItemSerializer(_LineSerializer):
    class Meta:
        model = TransferItem
        fields = _LineSerializer.LINE_FIELDS + ["transferred_qty"]
        read_only_fields = fields


class _DocumentSerializer(serializers.ModelSerializer):
    created_by_email = serializers.EmailField(source="created_by.email", read_only=True, default=None)
    processed_by_email = serializers.EmailField(source="processed_by.email", read_only=True, default=None)

    HEADER_FIELDS = [
        "id",
        "status",
        "created_by_email",
        "processed_by_email",
        "processed_at",
        "created_at",
        "updated_at",
    ]


class ReceiptSerializer(_DocumentSerializer):
    warehouse_name = serializers.CharField(source="warehouse.name", read_only=True)
    items = ReceiptItemSerializer(many=True, read_only=True)

    class Meta:
        model = Receipt
        fields = _DocumentSerializer.HEADER_FIELDS + [
            "supplier",
            "warehouse",
            "warehouse_name",
            "receipt_date",
            "items",
        ]
        read_only_fields = fields


class DeliverySerializer(_DocumentSerializer):
    items = DeliveryItemSerializer(many=True, read_only=True)

    class Meta:
        model = Delivery
        fields = _DocumentSerializer.HEADER_FIELDS + ["customer", "items"]
        read_only_fields = fields


class TransferSerializer(_DocumentSerializer):
    from_warehouse_name = serializers.CharField(source="from_warehouse.name", read_only=True)
    to_warehouse_name = serializers.CharField(source="to_warehouse.name", read_only=True)
    items = TransferItemSerializer(many=True, read_only=True)

    class Meta:
        model = Transfer
        fields = _DocumentSerializer.HEADER_FIELDS + [
            "from_warehouse",
            "from_warehouse_name",
            "to_warehouse",
            "to_warehouse_name",
            "items",
        ]
        read_only_fields = fields


# ======================================================
# INPUT: CREATE (DRAFT)
# ======================================================

class LineCreateSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1)


class DeliveryLineCreateSerializer(LineCreateSerializer):
    warehouse_id = serializers.UUIDField()


class ReceiptCreateSerializer(serializers.Serializer):
    supplier = serializers.CharField(max_length=200)
    warehouse_id = serializers.UUIDField()
    receipt_date = serializers.DateField(required=False, allow_null=True)
    items = LineCreateSerializer(many=True, allow_empty=False)


class DeliveryCreateSerializer(serializers.Serializer):
    customer = serializers.CharField(max_length=200)
    items = DeliveryLineCreateSerializer(many=True, allow_empty=False)


class TransferCreateSerializer(serializers.Serializer):
    from_warehouse_id = serializers.UUIDField()
    to_warehouse_id = serializers.UUIDField()
    items = LineCreateSerializer(many=True, allow_empty=False)


# ======================================================
# INPUT: TRANSITION (PATCH)
# ======================================================

class _TransitionSerializer(serializers.Serializer):
    """
    Line entries are passed through untouched; quantities and line ids are
    checked by operations.services.validation so every failure names its line.
    """
    status = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    items = serializers.ListField(child=serializers.DictField(), required=False, allow_null=True)


class ReceiptTransitionSerializer(_TransitionSerializer):
    receipt_id = serializers.UUIDField()


class DeliveryTransitionSerializer(_TransitionSerializer):
    delivery_id = serializers.UUIDField()


class TransferTransitionSerializer(_TransitionSerializer):
    transfer_id = serializers.UUIDField()
