"""Unit tests for port interface contracts.

Tests verify that port abstract base classes are properly defined
and that implementations must satisfy the interface contract.
"""

import pytest

from ticketing.core.ports import (
    SeatReservationPort,
    TicketPaymentPort,
    TicketPurchasePort,
)


@pytest.mark.parametrize(
    "port", [SeatReservationPort, TicketPaymentPort, TicketPurchasePort]
)
def test_port_cannot_be_instantiated(port: type) -> None:
    with pytest.raises(TypeError):
        port()


def test_incomplete_seat_reservation_rejected() -> None:
    class Incomplete(SeatReservationPort):
        pass

    with pytest.raises(TypeError):
        Incomplete()  # type: ignore[abstract]


def test_complete_implementations_instantiate() -> None:
    class Reservation(SeatReservationPort):
        def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
            return None

    class Payment(TicketPaymentPort):
        def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
            return None

    assert isinstance(Reservation(), SeatReservationPort)
    assert isinstance(Payment(), TicketPaymentPort)
