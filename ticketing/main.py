"""Composition root for the ticketing system.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
"""

import logging
import sys

from ticketing.adapters.payment.stdout import StdoutPaymentAdapter
from ticketing.adapters.seat_reservation.stdout import StdoutSeatReservationAdapter
from ticketing.config import Settings, load_settings
from ticketing.core.models import TicketPrices
from ticketing.core.ports import SeatReservationPort, TicketPaymentPort
from ticketing.core.ticket_service import TicketService


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def _build_seat_reservation(settings: Settings) -> SeatReservationPort:
    if settings.seat_reservation_backend == "stdout":
        return StdoutSeatReservationAdapter(verbose=settings.debug)
    raise ValueError(f"Unknown seat reservation backend: {settings.seat_reservation_backend}")


def _build_payment(settings: Settings) -> TicketPaymentPort:
    if settings.payment_backend == "stdout":
        return StdoutPaymentAdapter(verbose=settings.debug, currency=settings.currency)
    raise ValueError(f"Unknown payment backend: {settings.payment_backend}")


def build_ticket_service(settings: Settings | None = None) -> TicketService:
    """Load configuration, wire adapters, and build the ticket service.

    This is the composition root: the single place where adapters are
    instantiated and handed to the core.

    Steps:
    1. Load configuration from environment (unless given)
    2. Configure logging
    3. Instantiate adapters with configuration
    4. Initialize the core service

    Raises:
        ValueError: If a configured backend is unknown.
    """
    if settings is None:
        settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    seat_reservation = _build_seat_reservation(settings)
    logger.info(f"Seat reservation adapter: {settings.seat_reservation_backend}")
    payment = _build_payment(settings)
    logger.info(f"Payment adapter: {settings.payment_backend}")

    prices = TicketPrices(
        adult=settings.adult_ticket_price,
        child=settings.child_ticket_price,
    )
    return TicketService(
        seat_reservation=seat_reservation,
        payment=payment,
        prices=prices,
        max_tickets=settings.max_tickets_per_purchase,
    )
