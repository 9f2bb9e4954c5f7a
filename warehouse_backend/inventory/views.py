# inventory/views.py

"""
INVENTORY VIEWS

- GET    /api/warehouse          -> list warehouses
- POST   /api/warehouse          -> create warehouse
- DELETE /api/warehouse?id=      -> delete an unreferenced warehouse
- GET    /api/moves              -> stock move history (filterable, paginated)
"""

from django.core.exceptions import ValidationError
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import generics, status
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from inventory.filters import StockMoveFilter
from inventory.models import StockMove, Warehouse
from inventory.serializers import (
    StockMoveSerializer,
    WarehouseCreateSerializer,
    WarehouseSerializer,
)
from inventory.services.exceptions import InventoryError, WarehouseNotFoundError
from inventory.services.warehouses import create_warehouse, delete_warehouse


class WarehouseView(GenericAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = WarehouseSerializer

    @extend_schema(tags=["inventory"], responses=WarehouseSerializer(many=True))
    def get(self, request):
        qs = Warehouse.objects.all().order_by("name")
        return Response(WarehouseSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        tags=["inventory"],
        request=WarehouseCreateSerializer,
        responses={201: WarehouseSerializer},
    )
    def post(self, request):
        s = WarehouseCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            warehouse = create_warehouse(name=s.validated_data["name"])
        except (InventoryError, ValidationError) as exc:
            return Response({"detail": _message(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(WarehouseSerializer(warehouse).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        tags=["inventory"],
        parameters=[OpenApiParameter("id", str, required=True)],
        responses={200: dict},
    )
    def delete(self, request):
        warehouse_id = (request.query_params.get("id") or "").strip()
        if not warehouse_id:
            return Response({"detail": "id is required"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            delete_warehouse(warehouse_id=warehouse_id)
        except WarehouseNotFoundError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except InventoryError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({"detail": "Warehouse deleted"}, status=status.HTTP_200_OK)


class StockMoveListView(generics.ListAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = StockMoveSerializer
    filterset_class = StockMoveFilter
    queryset = StockMove.objects.select_related(
        "product", "product__category", "warehouse", "performed_by"
    ).order_by("-created_at")

    @extend_schema(tags=["inventory"])
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)


def _message(exc) -> str:
    if isinstance(exc, ValidationError):
        return "; ".join(exc.messages)
    return str(exc)
