from django.urls import path

from operations.api.views import DeliveryView, ReceiptView, TransferView

urlpatterns = [
    path("receipt", ReceiptView.as_view(), name="receipt"),
    path("delivery", DeliveryView.as_view(), name="delivery"),
    path("transfer", TransferView.as_view(), name="transfer"),
]
