# operations/apps.py

"""
OPERATIONS APP CONFIG

Stock documents and their workflow:
- Receipts (supplier -> warehouse)
- Deliveries (warehouse -> customer)
- Internal transfers (warehouse -> warehouse)
"""

from django.apps import AppConfig


class OperationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "operations"
    verbose_name = "Stock Operations"
