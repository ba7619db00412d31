"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeSeatReservationPort: Captured seat reservations
- FakeTicketPaymentPort: Captured payments
"""

from .payment import FakeTicketPaymentPort
from .seat_reservation import FakeSeatReservationPort

__all__ = [
    "FakeSeatReservationPort",
    "FakeTicketPaymentPort",
]
