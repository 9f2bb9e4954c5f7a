from django.urls import path

from inventory.views import StockMoveListView, WarehouseView

urlpatterns = [
    path("warehouse", WarehouseView.as_view(), name="warehouse"),
    path("moves", StockMoveListView.as_view(), name="moves"),
]
