from django.core.management.base import BaseCommand

from inventory.models import Warehouse
from products.models import Product
from products.services.catalog import add_product


class Command(BaseCommand):
    help = "Seed warehouses, categories, and products with initial stock"

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding warehouses and products..."))

        # -------------------------------
        # WAREHOUSES
        # -------------------------------
        warehouses = {}
        for name in ["Main Warehouse", "North Depot", "Overflow Store"]:
            obj, _ = Warehouse.objects.get_or_create(name=name)
            warehouses[name] = obj

        # -------------------------------
        # PRODUCTS (+ initial stock)
        # -------------------------------
        products_data = [
            ("STL-BOLT-M8", "Steel Bolt M8", "pcs", "Fasteners", 500, "Main Warehouse"),
            ("STL-NUT-M8", "Steel Nut M8", "pcs", "Fasteners", 800, "Main Warehouse"),
            ("CBL-CU-2.5", "Copper Cable 2.5mm", "m", "Electrical", 1200, "North Depot"),
            ("PNT-WHT-5L", "White Paint 5L", "can", "Finishing", 40, "Overflow Store"),
            ("GLV-NTR-L", "Nitrile Gloves L", "box", "", 60, "Main Warehouse"),
        ]

        created = 0
        for sku, name, uom, category, qty, warehouse in products_data:
            if Product.objects.filter(sku=sku).exists():
                continue

            add_product(
                sku=sku,
                name=name,
                uom=uom,
                category=category,
                quantity=qty,
                warehouse_id=warehouses[warehouse].id,
            )
            created += 1

        self.stdout.write(self.style.SUCCESS(f"Seeded {created} products"))
