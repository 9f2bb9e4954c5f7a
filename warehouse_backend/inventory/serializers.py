# inventory/serializers.py

from rest_framework import serializers

from inventory.models import Stock, StockMove, Warehouse


class WarehouseSerializer(serializers.ModelSerializer):
    class Meta:
        model = Warehouse
        fields = ["id", "name", "created_at"]
        read_only_fields = ["id", "created_at"]


class WarehouseCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=120)

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("name is required")
        return value


class StockSerializer(serializers.ModelSerializer):
    """
    Read-only ledger line, nested under products.
    """
    warehouse_id = serializers.UUIDField(source="warehouse.id", read_only=True)
    warehouse_name = serializers.CharField(source="warehouse.name", read_only=True)

    class Meta:
        model = Stock
        fields = ["warehouse_id", "warehouse_name", "quantity", "updated_at"]
        read_only_fields = fields


class StockMoveSerializer(serializers.ModelSerializer):
    product_sku = serializers.CharField(source="product.sku", read_only=True)
    product_name = serializers.CharField(source="product.name", read_only=True)
    warehouse_name = serializers.CharField(source="warehouse.name", read_only=True)
    performed_by_email = serializers.EmailField(
        source="performed_by.email", read_only=True, default=None
    )

    class Meta:
        model = StockMove
        fields = [
            "id",
            "product",
            "product_sku",
            "product_name",
            "warehouse",
            "warehouse_name",
            "direction",
            "reason",
            "quantity",
            "reference_id",
            "performed_by_email",
            "created_at",
        ]
        read_only_fields = fields
