"""Port interfaces for the ticketing system.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - SeatReservationPort: Reserve seats with the seat booking provider
   - TicketPaymentPort: Take payment through the payment gateway

2. **Driving Ports** (callers invoke the core)
   - TicketPurchasePort: Validate, price and complete a ticket purchase
"""

from abc import ABC, abstractmethod

from .models import TicketTypeRequest


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class SeatReservationPort(ABC):
    """Port for reserving seats with the external seat booking service.

    The core only calls this port once a purchase has passed every
    validation rule, with the final number of seats to allocate.
    The external service is assumed to always succeed.
    """

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve seats for an account.

        Args:
            account_id: Positive account identifier.
            total_seats_to_allocate: Non-negative number of seats.

        Raises:
            Exception: If the booking service fails. The core does not
                catch or translate this.
        """


class TicketPaymentPort(ABC):
    """Port for charging an account through the external payment gateway.

    Called after seat reservation with the final computed total.
    The external gateway is assumed to always succeed.
    """

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge an account.

        Args:
            account_id: Positive account identifier.
            total_amount_to_pay: Non-negative amount in whole currency units.

        Raises:
            Exception: If the payment gateway fails. The core does not
                catch or translate this.
        """


# ============================================================================
# DRIVING PORTS (Callers invoke the core)
# ============================================================================


class TicketPurchasePort(ABC):
    """Entry point for purchasing tickets."""

    @abstractmethod
    def purchase_tickets(
        self,
        account_id: int | None,
        *ticket_type_requests: TicketTypeRequest | None,
    ) -> None:
        """Validate and price the requests, then reserve seats and pay.

        Args:
            account_id: Positive account identifier.
            *ticket_type_requests: Ticket requests for this purchase.

        Raises:
            InvalidPurchaseError: If any purchase rule is violated. No
                external call is made in that case.
        """
