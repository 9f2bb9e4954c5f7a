# products/serializers/product.py

"""
PRODUCT SERIALIZERS

Purpose:
- Output: product with category name and per-warehouse stock.
- Input: add / update payloads (validated here, applied by products.services.catalog).

Stock is read from inventory.Stock only. total_stock uses the list
annotation when present, else Product.total_stock_db.
"""

from rest_framework import serializers

from inventory.serializers import StockSerializer
from products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    category_name = serializers.CharField(source="category.name", read_only=True, default=None)
    stocks = StockSerializer(many=True, read_only=True)
    total_stock = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            "id",
            "sku",
            "name",
            "uom",
            "category",
            "category_name",
            "stocks",
            "total_stock",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_total_stock(self, obj) -> int:
        annotated = getattr(obj, "total_stock", None)
        if annotated is not None:
            return int(annotated)
        return obj.total_stock_db


class ProductCreateSerializer(serializers.Serializer):
    sku = serializers.CharField(max_length=64)
    name = serializers.CharField(max_length=255)
    uom = serializers.CharField(max_length=32)
    category = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    quantity = serializers.IntegerField(required=False, min_value=0, default=0)
    warehouse_id = serializers.UUIDField(required=False, allow_null=True)

    def validate(self, attrs):
        if attrs.get("quantity") and not attrs.get("warehouse_id"):
            raise serializers.ValidationError(
                {"warehouse_id": "warehouse_id is required when quantity is given"}
            )
        return attrs


class ProductUpdateSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    sku = serializers.CharField(max_length=64, required=False, allow_blank=True)
    name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    uom = serializers.CharField(max_length=32, required=False, allow_blank=True)
    category = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
