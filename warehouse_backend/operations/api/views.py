# operations/api/views.py

"""
STOCK DOCUMENT VIEWS

Same surface for every document kind:
- GET   /api/<kind>[?status=][&id=]  -> list (newest first) or one document
- POST  /api/<kind>                  -> create draft
- PATCH /api/<kind>                  -> save draft / validate / complete

Errors: not-found family -> 404, other workflow errors -> 400,
always as {"detail": "..."}.
"""

import logging

from django.core.exceptions import ValidationError
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from inventory.services.exceptions import InventoryError, WarehouseNotFoundError
from operations.api.serializers import (
    DeliveryCreateSerializer,
    DeliverySerializer,
    DeliveryTransitionSerializer,
    ReceiptCreateSerializer,
    ReceiptSerializer,
    ReceiptTransitionSerializer,
    TransferCreateSerializer,
    TransferSerializer,
    TransferTransitionSerializer,
)
from operations.services.documents import (
    create_delivery,
    create_receipt,
    create_transfer,
    get_document,
    list_documents,
)
from operations.services.exceptions import (
    DocumentError,
    DocumentNotFoundError,
    UnknownLineItemError,
)
from operations.services.kinds import DELIVERY, RECEIPT, TRANSFER
from operations.services.transitions import transition_document
from products.services.exceptions import ProductError, ProductNotFoundError

logger = logging.getLogger(__name__)

NOT_FOUND = (
    DocumentNotFoundError,
    UnknownLineItemError,
    ProductNotFoundError,
    WarehouseNotFoundError,
)
DOMAIN_ERRORS = (DocumentError, InventoryError, ProductError, ValidationError)


def error_response(exc):
    if isinstance(exc, NOT_FOUND):
        return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, ValidationError):
        return Response({"detail": "; ".join(exc.messages)}, status=status.HTTP_400_BAD_REQUEST)
    return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)


class DocumentView(GenericAPIView):
    """
    Base view; subclasses pick the kind and the three serializers.

    Subclasses must also implement create_document(data, user), which maps
    the validated create payload onto the kind's create_* service and
    returns the new document.
    """

    permission_classes = [IsAuthenticated]

    kind = None
    create_serializer_class = None
    transition_serializer_class = None

    def create_document(self, data, user):
        raise NotImplementedError

    def get(self, request):
        document_id = (request.query_params.get("id") or "").strip()
        if document_id:
            try:
                document = get_document(self.kind, document_id)
            except DocumentError as exc:
                return error_response(exc)
            return Response(self.get_serializer(document).data, status=status.HTTP_200_OK)

        doc_status = (request.query_params.get("status") or "").strip() or None
        qs = list_documents(self.kind, status=doc_status)
        return Response(self.get_serializer(qs, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        s = self.create_serializer_class(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            document = self.create_document(s.validated_data, request.user)
        except DOMAIN_ERRORS as exc:
            return error_response(exc)

        document = get_document(self.kind, document.id)
        return Response(self.get_serializer(document).data, status=status.HTTP_201_CREATED)

    def patch(self, request):
        s = self.transition_serializer_class(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        items = data.get("items")
        if items is not None:
            items = [
                {
                    "line_id": entry.get(self.kind.line_key),
                    "fulfilled_qty": entry.get(self.kind.fulfilled_field),
                }
                for entry in items
            ]

        try:
            document = transition_document(
                kind=self.kind,
                document_id=data[self.kind.id_key],
                status=(data.get("status") or "").strip() or None,
                items=items,
                user=request.user,
            )
        except DOMAIN_ERRORS as exc:
            return error_response(exc)

        return Response(self.get_serializer(document).data, status=status.HTTP_200_OK)


_LIST_PARAMS = [
    OpenApiParameter("status", str, required=False),
    OpenApiParameter("id", str, required=False),
]


@extend_schema_view(
    get=extend_schema(tags=["receipts"], parameters=_LIST_PARAMS, responses=ReceiptSerializer(many=True)),
    post=extend_schema(tags=["receipts"], request=ReceiptCreateSerializer, responses={201: ReceiptSerializer}),
    patch=extend_schema(tags=["receipts"], request=ReceiptTransitionSerializer, responses={200: ReceiptSerializer}),
)
class ReceiptView(DocumentView):
    kind = RECEIPT
    serializer_class = ReceiptSerializer
    create_serializer_class = ReceiptCreateSerializer
    transition_serializer_class = ReceiptTransitionSerializer

    def create_document(self, data, user):
        return create_receipt(
            supplier=data["supplier"],
            warehouse_id=data["warehouse_id"],
            receipt_date=data.get("receipt_date"),
            items=data["items"],
            user=user,
        )


@extend_schema_view(
    get=extend_schema(tags=["deliveries"], parameters=_LIST_PARAMS, responses=DeliverySerializer(many=True)),
    post=extend_schema(tags=["deliveries"], request=DeliveryCreateSerializer, responses={201: DeliverySerializer}),
    patch=extend_schema(tags=["deliveries"], request=DeliveryTransitionSerializer, responses={200: DeliverySerializer}),
)
class DeliveryView(DocumentView):
    kind = DELIVERY
    serializer_class = DeliverySerializer
    create_serializer_class = DeliveryCreateSerializer
    transition_serializer_class = DeliveryTransitionSerializer

    def create_document(self, data, user):
        return create_delivery(
            customer=data["customer"],
            items=data["items"],
            user=user,
        )


@extend_schema_view(
    get=extend_schema(tags=["transfers"], parameters=_LIST_PARAMS, responses=TransferSerializer(many=True)),
    post=extend_schema(tags=["transfers"], request=TransferCreateSerializer, responses={201: TransferSerializer}),
    patch=extend_schema(tags=["transfers"], request=TransferTransitionSerializer, responses={200: TransferSerializer}),
)
class TransferView(DocumentView):
    kind = TRANSFER
    serializer_class = TransferSerializer
    create_serializer_class = TransferCreateSerializer
    transition_serializer_class = TransferTransitionSerializer

    def create_document(self, data, user):
        return create_transfer(
            from_warehouse_id=data["from_warehouse_id"],
            to_warehouse_id=data["to_warehouse_id"],
            items=data["items"],
            user=user,
        )
