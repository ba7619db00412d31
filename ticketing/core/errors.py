"""Purchase validation errors."""

from dataclasses import dataclass
from enum import Enum

from .models import MAX_TICKETS


class ErrorCode(Enum):
    """Kinds of rejected purchase."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    INVALID_REQUEST_LIST = "INVALID_REQUEST_LIST"
    INVALID_TICKET_COUNT = "INVALID_TICKET_COUNT"
    MISSING_ADULT = "MISSING_ADULT"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"


@dataclass(frozen=True)
class InvalidPurchaseError(Exception):
    """Base purchase error with code and user-facing message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return self.message


class InvalidAccountError(InvalidPurchaseError):
    """Raised when the account ID is missing or not positive."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Invalid account ID.",
        )


class InvalidRequestListError(InvalidPurchaseError):
    """Raised when the request list, or one of its entries, is missing."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_REQUEST_LIST,
            message="Ticket type request can't be null.",
        )


class InvalidTicketCountError(InvalidPurchaseError):
    """Raised when a request asks for zero or fewer tickets."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_COUNT,
            message="Invalid ticket number, must be positive integer.",
        )


class MissingAdultError(InvalidPurchaseError):
    """Raised when a booking contains no adult ticket."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_ADULT,
            message="Ticket booking should contain at least one adult.",
        )


class TooManyTicketsError(InvalidPurchaseError):
    """Raised when a booking exceeds the per-purchase ticket cap."""

    def __init__(self, max_tickets: int = MAX_TICKETS) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_TICKETS,
            message=f"Maximum only {max_tickets} tickets allowed.",
        )
