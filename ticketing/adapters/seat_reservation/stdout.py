"""Stdout seat reservation adapter.

Implements SeatReservationPort by logging each reservation and,
when verbose, printing a confirmation line. Stands in for the
third-party booking provider, which always succeeds.
"""

import logging

from ticketing.core.ports import SeatReservationPort

logger = logging.getLogger(__name__)


class StdoutSeatReservationAdapter(SeatReservationPort):
    """Records seat reservations to the log and stdout."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout seat reservation adapter.

        Args:
            verbose: If True, print a confirmation for each reservation.
        """
        self.verbose = verbose

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve seats for an account."""
        if account_id <= 0:
            raise ValueError(f"account_id must be positive, got {account_id}")
        if total_seats_to_allocate < 0:
            raise ValueError(
                f"total_seats_to_allocate must be non-negative, got {total_seats_to_allocate}"
            )

        logger.info(f"Reserving {total_seats_to_allocate} seats for account {account_id}")
        if self.verbose:
            print(self._format_confirmation(account_id, total_seats_to_allocate))

    @staticmethod
    def _format_confirmation(account_id: int, seats: int) -> str:
        """Format the reservation confirmation line."""
        return f"SEATS RESERVED | account={account_id} seats={seats}"
