# inventory/filters.py

import django_filters

from inventory.models import StockMove


class StockMoveFilter(django_filters.FilterSet):
    """
    /api/moves?reason=&warehouse=&product=&category=&date_from=&date_to=
    """

    reason = django_filters.ChoiceFilter(choices=StockMove.Reason.choices)
    direction = django_filters.ChoiceFilter(choices=StockMove.Direction.choices)
    warehouse = django_filters.UUIDFilter(field_name="warehouse_id")
    product = django_filters.UUIDFilter(field_name="product_id")
    reference = django_filters.UUIDFilter(field_name="reference_id")
    category = django_filters.CharFilter(
        field_name="product__category__name", lookup_expr="iexact"
    )
    date_from = django_filters.DateFilter(field_name="created_at", lookup_expr="date__gte")
    date_to = django_filters.DateFilter(field_name="created_at", lookup_expr="date__lte")

    class Meta:
        model = StockMove
        fields = ["reason", "direction", "warehouse", "product", "reference", "category"]
