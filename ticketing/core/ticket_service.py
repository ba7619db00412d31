"""Purchase rules for the ticketing system.

This module validates a batch of ticket requests, prices it, and
only then hands the totals to the seat reservation and payment
ports.
"""

import logging

from .errors import (
    InvalidAccountError,
    InvalidPurchaseError,
    InvalidRequestListError,
    InvalidTicketCountError,
    MissingAdultError,
    TooManyTicketsError,
)
from .models import (
    MAX_TICKETS,
    PurchaseSummary,
    TicketPrices,
    TicketType,
    TicketTypeRequest,
)
from .ports import SeatReservationPort, TicketPaymentPort, TicketPurchasePort

logger = logging.getLogger(__name__)


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class TicketService(TicketPurchasePort):
    """Implements the ticket purchase workflow.

    Rules are checked in a fixed order and the first violation wins:
    account, then each entry in turn (missing, then count), then adult
    present, then ticket cap.
    The service keeps no per-purchase state, so one instance can be
    shared between threads.
    """

    def __init__(
        self,
        seat_reservation: SeatReservationPort,
        payment: TicketPaymentPort,
        prices: TicketPrices | None = None,
        max_tickets: int = MAX_TICKETS,
    ):
        if max_tickets <= 0:
            raise ValueError(f"max_tickets must be positive, got {max_tickets}")
        self.seat_reservation = seat_reservation
        self.payment = payment
        self.prices = prices if prices is not None else TicketPrices()
        self.max_tickets = max_tickets

    def purchase_tickets(
        self,
        account_id: int | None,
        *ticket_type_requests: TicketTypeRequest | None,
    ) -> None:
        """Validate and price the requests, then reserve seats and pay.

        Reservation happens before payment. Failures raised by either
        port propagate unchanged and nothing is rolled back.

        Raises:
            InvalidPurchaseError: If any purchase rule is violated.
        """
        try:
            if not _is_positive_int(account_id):
                raise InvalidAccountError()
            summary = self.summarize(*ticket_type_requests)
        except InvalidPurchaseError as e:
            logger.warning(
                f"Rejected purchase for account {account_id!r}: "
                f"{e.code.value} ({e.message})"
            )
            raise

        self.seat_reservation.reserve_seat(account_id, summary.total_seats)
        self.payment.make_payment(account_id, summary.total_price)

        logger.info(
            f"Purchased {summary.total_tickets} tickets for account {account_id}: "
            f"{summary.total_seats} seats, total {summary.total_price}"
        )

    def summarize(self, *ticket_type_requests: TicketTypeRequest | None) -> PurchaseSummary:
        """Check the request rules and compute purchase totals.

        Pure: no port is called and the same requests always give an
        equal summary. A single ``None`` argument stands for a missing
        request list.

        Raises:
            InvalidPurchaseError: If any request rule is violated.
        """
        total_price = 0
        total_seats = 0
        total_tickets = 0
        has_adult = False

        # Entries are checked in order; the first bad entry decides the error
        for request in ticket_type_requests:
            if not isinstance(request, TicketTypeRequest):
                raise InvalidRequestListError()

            count = request.no_of_tickets
            if not _is_positive_int(count):
                raise InvalidTicketCountError()

            total_tickets += count
            if request.ticket_type.occupies_seat:
                total_seats += count
                total_price += self.prices.price_for(request.ticket_type) * count
            if request.ticket_type is TicketType.ADULT:
                has_adult = True

        if not has_adult:
            raise MissingAdultError()
        if total_tickets > self.max_tickets:
            raise TooManyTicketsError(self.max_tickets)

        return PurchaseSummary(
            total_price=total_price,
            total_seats=total_seats,
            total_tickets=total_tickets,
            has_adult=has_adult,
        )
