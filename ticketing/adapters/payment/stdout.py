"""Stdout payment adapter.

Implements TicketPaymentPort by logging each payment and, when
verbose, printing a receipt line. Stands in for the third-party
payment gateway, which always succeeds.
"""

import logging

from ticketing.core.ports import TicketPaymentPort

logger = logging.getLogger(__name__)


class StdoutPaymentAdapter(TicketPaymentPort):
    """Records payments to the log and stdout."""

    def __init__(self, verbose: bool = False, currency: str = "GBP"):
        """Initialize stdout payment adapter.

        Args:
            verbose: If True, print a receipt for each payment.
            currency: Currency code shown on receipts.
        """
        self.verbose = verbose
        self.currency = currency

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge an account."""
        if account_id <= 0:
            raise ValueError(f"account_id must be positive, got {account_id}")
        if total_amount_to_pay < 0:
            raise ValueError(
                f"total_amount_to_pay must be non-negative, got {total_amount_to_pay}"
            )

        logger.info(
            f"Charging account {account_id} {total_amount_to_pay} {self.currency}"
        )
        if self.verbose:
            print(self._format_receipt(account_id, total_amount_to_pay))

    def _format_receipt(self, account_id: int, amount: int) -> str:
        """Format the payment receipt line."""
        return f"PAYMENT TAKEN | account={account_id} amount={amount} {self.currency}"
