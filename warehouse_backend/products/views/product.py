# products/views/product.py

"""
PRODUCT VIEWS

- GET    /api/product            -> products with per-warehouse stock
- DELETE /api/product?id=        -> delete product and everything referencing it
- POST   /api/product/add        -> create product (+ optional initial stock)
- PUT    /api/product/update     -> edit name / uom / category
"""

from django.core.exceptions import ValidationError
from django.db.models import Prefetch, Sum
from django.db.models.functions import Coalesce
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from inventory.models import Stock
from inventory.services.exceptions import InventoryError, WarehouseNotFoundError
from products.models import Product
from products.serializers import (
    ProductCreateSerializer,
    ProductSerializer,
    ProductUpdateSerializer,
)
from products.services.catalog import add_product, delete_product, update_product
from products.services.exceptions import ProductError, ProductNotFoundError

NOT_FOUND = (ProductNotFoundError, WarehouseNotFoundError)


def _error_response(exc):
    if isinstance(exc, NOT_FOUND):
        return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, ValidationError):
        return Response({"detail": "; ".join(exc.messages)}, status=status.HTTP_400_BAD_REQUEST)
    return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)


def _product_queryset():
    return (
        Product.objects.select_related("category")
        .prefetch_related(
            Prefetch("stocks", queryset=Stock.objects.select_related("warehouse"))
        )
    )


class ProductListView(GenericAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = ProductSerializer

    @extend_schema(tags=["products"], responses=ProductSerializer(many=True))
    def get(self, request):
        qs = _product_queryset().annotate(
            total_stock=Coalesce(Sum("stocks__quantity"), 0)
        ).order_by("-created_at")
        return Response(ProductSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        tags=["products"],
        parameters=[OpenApiParameter("id", str, required=True)],
        responses={200: dict},
    )
    def delete(self, request):
        product_id = (request.query_params.get("id") or "").strip()
        if not product_id:
            return Response({"detail": "Product ID is required"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            delete_product(product_id=product_id)
        except ProductError as exc:
            return _error_response(exc)

        return Response({"detail": "Product deleted successfully"}, status=status.HTTP_200_OK)


class ProductAddView(GenericAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = ProductCreateSerializer

    @extend_schema(
        tags=["products"],
        request=ProductCreateSerializer,
        responses={201: ProductSerializer},
    )
    def post(self, request):
        s = self.get_serializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        try:
            product = add_product(
                sku=data["sku"],
                name=data["name"],
                uom=data["uom"],
                category=data.get("category"),
                quantity=data.get("quantity") or 0,
                warehouse_id=data.get("warehouse_id"),
                user=request.user,
            )
        except (ProductError, InventoryError, ValidationError) as exc:
            return _error_response(exc)

        product = _product_queryset().get(id=product.id)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)


class ProductUpdateView(GenericAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = ProductUpdateSerializer

    @extend_schema(
        tags=["products"],
        request=ProductUpdateSerializer,
        responses={200: ProductSerializer},
    )
    def put(self, request):
        s = self.get_serializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        try:
            product = update_product(
                product_id=data["id"],
                sku=data.get("sku"),
                name=data.get("name"),
                uom=data.get("uom"),
                category=data.get("category"),
            )
        except (ProductError, ValidationError) as exc:
            return _error_response(exc)

        product = _product_queryset().get(id=product.id)
        return Response(ProductSerializer(product).data, status=status.HTTP_200_OK)
