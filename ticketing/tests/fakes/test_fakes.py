"""Unit tests for fake adapter implementations.

These tests verify that fake adapters work correctly as test doubles
and can be used confidently in tests of core domain logic.
"""

import pytest

from ticketing.core.ports import SeatReservationPort, TicketPaymentPort
from ticketing.tests.fakes import FakeSeatReservationPort, FakeTicketPaymentPort


class TestFakeSeatReservationPort:
    """Tests for FakeSeatReservationPort."""

    def test_implements_port(self) -> None:
        assert isinstance(FakeSeatReservationPort(), SeatReservationPort)

    def test_captures_reservations(self) -> None:
        fake = FakeSeatReservationPort()
        fake.reserve_seat(1, 3)
        fake.reserve_seat(2, 5)

        assert fake.reservations == [(1, 3), (2, 5)]
        assert fake.reserve_call_count == 2
        assert fake.get_last_reservation() == (2, 5)

    def test_last_reservation_none_when_empty(self) -> None:
        assert FakeSeatReservationPort().get_last_reservation() is None

    def test_should_fail_raises_and_counts_call(self) -> None:
        fake = FakeSeatReservationPort()
        fake.set_should_fail(True, "booking provider down")

        with pytest.raises(RuntimeError, match="booking provider down"):
            fake.reserve_seat(1, 3)

        assert fake.reserve_call_count == 1
        assert fake.reservations == []

    def test_reset(self) -> None:
        fake = FakeSeatReservationPort()
        fake.reserve_seat(1, 3)
        fake.set_should_fail(True)
        fake.reset()

        assert fake.reservations == []
        assert fake.reserve_call_count == 0
        assert fake.call_log == []
        assert fake.should_fail is False


class TestFakeTicketPaymentPort:
    """Tests for FakeTicketPaymentPort."""

    def test_implements_port(self) -> None:
        assert isinstance(FakeTicketPaymentPort(), TicketPaymentPort)

    def test_captures_payments(self) -> None:
        fake = FakeTicketPaymentPort()
        fake.make_payment(1, 50)
        fake.make_payment(1, 30)
        fake.make_payment(2, 25)

        assert fake.payment_call_count == 3
        assert fake.get_last_payment() == (2, 25)
        assert fake.get_total_charged(1) == 80

    def test_should_fail_raises(self) -> None:
        fake = FakeTicketPaymentPort()
        fake.set_should_fail(True)

        with pytest.raises(RuntimeError, match="Payment failed"):
            fake.make_payment(1, 50)

        assert fake.payments == []


def test_shared_call_log_records_order() -> None:
    """Both fakes append to the same log when one is shared."""
    call_log: list[str] = []
    reservation = FakeSeatReservationPort(call_log)
    payment = FakeTicketPaymentPort(call_log)

    payment.make_payment(1, 10)
    reservation.reserve_seat(1, 1)

    assert call_log == ["make_payment", "reserve_seat"]
