# operations/services/exceptions.py

"""
Document workflow errors.

Messages are shown to API callers as-is and name the offending line
where one is involved.
"""


class DocumentError(Exception):
    pass


class DocumentNotFoundError(DocumentError):
    pass


class MissingFulfillmentDataError(DocumentError):
    pass


class UnknownLineItemError(DocumentError):
    pass


class InvalidQuantityError(DocumentError):
    pass


class InvalidTransferRouteError(DocumentError):
    pass


class InvalidStatusTransitionError(DocumentError):
    pass
