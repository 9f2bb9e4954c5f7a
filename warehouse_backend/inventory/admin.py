from django.contrib import admin

from inventory.models import Stock, StockMove, Warehouse


@admin.register(Warehouse)
class WarehouseAdmin(admin.ModelAdmin):
    list_display = ("name", "created_at")
    search_fields = ("name",)


class ReadOnlyAdmin(admin.ModelAdmin):
    """
    Ledger rows are written by inventory.services.ledger only.
    """

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Stock)
class StockAdmin(ReadOnlyAdmin):
    list_display = ("product", "warehouse", "quantity", "updated_at")
    list_filter = ("warehouse",)
    search_fields = ("product__sku", "product__name")


@admin.register(StockMove)
class StockMoveAdmin(ReadOnlyAdmin):
    list_display = ("created_at", "reason", "direction", "product", "warehouse", "quantity", "performed_by")
    list_filter = ("reason", "direction", "warehouse")
    search_fields = ("product__sku", "product__name")
