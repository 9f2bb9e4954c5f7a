from django.contrib import admin

from products.models import Category, Product


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "created_at")
    search_fields = ("name",)


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("sku", "name", "uom", "category", "created_at")
    list_filter = ("category",)
    search_fields = ("sku", "name")
    readonly_fields = ("created_at", "updated_at")

    def get_readonly_fields(self, request, obj=None):
        # SKU is fixed once the product exists.
        if obj is not None:
            return self.readonly_fields + ("sku",)
        return self.readonly_fields
