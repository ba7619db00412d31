"""Core domain logic for the ticketing system.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .errors import (
    ErrorCode,
    InvalidAccountError,
    InvalidPurchaseError,
    InvalidRequestListError,
    InvalidTicketCountError,
    MissingAdultError,
    TooManyTicketsError,
)
from .models import PurchaseSummary, TicketPrices, TicketType, TicketTypeRequest

__all__ = [
    "ErrorCode",
    "InvalidAccountError",
    "InvalidPurchaseError",
    "InvalidRequestListError",
    "InvalidTicketCountError",
    "MissingAdultError",
    "PurchaseSummary",
    "TicketPrices",
    "TicketType",
    "TicketTypeRequest",
    "TooManyTicketsError",
]
