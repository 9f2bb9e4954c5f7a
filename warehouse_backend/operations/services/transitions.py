# operations/services/transitions.py

"""
======================================================
PATH: operations/services/transitions.py
======================================================
DOCUMENT TRANSITIONS (ORCHESTRATOR)

One entry point for all document kinds:

    transition_document(kind=..., document_id=..., status=..., items=..., user=...)

Canonical flow (single transaction):
1) Lock the document row (two transitions of one document serialise)
2) Check the status change against the kind's vocabulary
3) Validate every supplied line (locks decremented stock rows)
4) Mutate the ledger line by line: decrement source, then increment destination
5) Persist fulfilled quantities, processed_by / processed_at and status

Rules:
- draft -> final status is one-shot; anything on a non-draft document is rejected.
- draft -> draft (or no status) is a header-only save: no ledger effect,
  any items sent along are ignored.
- Any failure raises before step 4 or rolls back with the transaction:
  the document and the ledger are left exactly as they were.
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from inventory.services import ledger
from inventory.services.exceptions import InventoryError
from operations.models import DocumentStatus

from .documents import get_document
from .exceptions import DocumentError, DocumentNotFoundError, InvalidStatusTransitionError
from .kinds import DocumentKind
from .validation import validate_fulfillment

logger = logging.getLogger(__name__)


def _lock_document(kind: DocumentKind, document_id):
    try:
        locked = kind.model.objects.select_for_update().filter(id=document_id).first()
    except (ValidationError, ValueError, TypeError) as exc:
        raise DocumentNotFoundError(f"{kind.display} not found: {document_id}") from exc
    if locked is None:
        raise DocumentNotFoundError(f"{kind.display} not found: {document_id}")
    return get_document(kind, locked.id)


def _check_status(kind: DocumentKind, document, status) -> str:
    target = status or DocumentStatus.DRAFT

    if target not in kind.statuses:
        raise InvalidStatusTransitionError(
            f"Unknown {kind.name} status '{target}'; expected one of "
            f"{', '.join(sorted(kind.statuses))}"
        )

    if not document.is_draft:
        raise InvalidStatusTransitionError(
            f"{kind.display} is already {document.status} and cannot be changed"
        )

    return target


def _apply(kind: DocumentKind, document, plan, *, user):
    for planned in plan:
        line, qty = planned.line, planned.qty

        if qty > 0:
            if kind.source is not None:
                ledger.decrement(
                    product_id=line.product_id,
                    warehouse_id=kind.source(document, line),
                    amount=qty,
                    reason=kind.move_reason,
                    reference_id=document.id,
                    user=user,
                )
            if kind.destination is not None:
                ledger.increment(
                    product_id=line.product_id,
                    warehouse_id=kind.destination(document, line),
                    amount=qty,
                    reason=kind.move_reason,
                    reference_id=document.id,
                    user=user,
                )

        setattr(line, kind.fulfilled_field, qty)
        line.save(update_fields=[kind.fulfilled_field])


@transaction.atomic
def transition_document(
    *,
    kind: DocumentKind,
    document_id,
    status=None,
    items=None,
    user=None,
):
    """
    items: [{"line_id": <uuid>, "fulfilled_qty": <int>}, ...]
    Returns the refreshed document.
    """
    try:
        document = _lock_document(kind, document_id)
        target = _check_status(kind, document, status)

        if target == kind.final_status:
            plan = validate_fulfillment(
                kind=kind, document=document, status=target, items=items
            )
            _apply(kind, document, plan, user=user)

            document.processed_by = user
            document.processed_at = timezone.now()

        document.status = target
        document.save(update_fields=["status", "processed_by", "processed_at", "updated_at"])

    except (DocumentError, InventoryError) as exc:
        logger.warning(
            "Document transition rejected",
            extra={
                "kind": kind.name,
                "document_id": str(document_id),
                "target_status": str(status or ""),
                "reason": str(exc),
            },
        )
        raise

    logger.info(
        "Document transitioned",
        extra={
            "kind": kind.name,
            "document_id": str(document.id),
            "status": document.status,
            "user_id": str(getattr(user, "id", "") or ""),
        },
    )
    return get_document(kind, document.id)
