from django.contrib import admin

from operations.models import (
    Delivery,
    DeliveryItem,
    Receipt,
    ReceiptItem,
    Transfer,
    TransferItem,
)


class _ItemInline(admin.TabularInline):
    extra = 0
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False


class ReceiptItemInline(_ItemInline):
    model = ReceiptItem


class DeliveryItemInline(_ItemInline):
    model = DeliveryItem


class TransferItemInline(_ItemInline):
    model = TransferItem


class _DocumentAdmin(admin.ModelAdmin):
    """
    Documents are advanced through the API (stock moves with them);
    the admin only inspects them.
    """

    list_filter = ("status",)
    readonly_fields = ("status", "created_by", "processed_by", "processed_at", "created_at", "updated_at")

    def has_add_permission(self, request):
        return False


@admin.register(Receipt)
class ReceiptAdmin(_DocumentAdmin):
    list_display = ("id", "supplier", "warehouse", "status", "receipt_date", "created_at")
    search_fields = ("supplier",)
    inlines = [ReceiptItemInline]


@admin.register(Delivery)
class DeliveryAdmin(_DocumentAdmin):
    list_display = ("id", "customer", "status", "created_at")
    search_fields = ("customer",)
    inlines = [DeliveryItemInline]


@admin.register(Transfer)
class TransferAdmin(_DocumentAdmin):
    list_display = ("id", "from_warehouse", "to_warehouse", "status", "created_at")
    inlines = [TransferItemInline]
