from django.urls import path

from products.views import ProductAddView, ProductListView, ProductUpdateView

urlpatterns = [
    path("product", ProductListView.as_view(), name="product"),
    path("product/add", ProductAddView.as_view(), name="product-add"),
    path("product/update", ProductUpdateView.as_view(), name="product-update"),
]
