from .exceptions import (
    DocumentError,
    DocumentNotFoundError,
    InvalidQuantityError,
    InvalidStatusTransitionError,
    InvalidTransferRouteError,
    MissingFulfillmentDataError,
    UnknownLineItemError,
)

__all__ = [
    "DocumentError",
    "DocumentNotFoundError",
    "InvalidQuantityError",
    "InvalidStatusTransitionError",
    "InvalidTransferRouteError",
    "MissingFulfillmentDataError",
    "UnknownLineItemError",
]
