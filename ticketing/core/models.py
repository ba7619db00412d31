"""Domain models for the ticketing system.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from enum import Enum

# Most tickets (all types) allowed in a single purchase
MAX_TICKETS = 25


class TicketType(Enum):
    """Ticket categories sold at a flat rate.

    - ADULT: occupies a seat, required in every booking
    - CHILD: occupies a seat
    - INFANT: sits on an adult's lap, never seated and never charged
    """

    ADULT = "adult"
    CHILD = "child"
    INFANT = "infant"

    @property
    def occupies_seat(self) -> bool:
        """Does a ticket of this type need a reserved seat?"""
        return self is not TicketType.INFANT


@dataclass(frozen=True)
class TicketTypeRequest:
    """A request for a number of tickets of a single type.

    The count is not checked here; TicketService rejects non-positive
    counts as part of its ordered purchase rules.
    """

    ticket_type: TicketType
    no_of_tickets: int


@dataclass(frozen=True)
class TicketPrices:
    """Flat per-ticket rates in whole currency units.

    Infants are always free; only seated ticket types carry a rate.
    """

    adult: int = 25
    child: int = 15

    def __post_init__(self) -> None:
        """Validate price invariants on creation."""
        for name in ("adult", "child"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} price must be non-negative, got {value}")

    def price_for(self, ticket_type: TicketType) -> int:
        """Return the flat rate for one ticket of the given type."""
        if ticket_type is TicketType.ADULT:
            return self.adult
        if ticket_type is TicketType.CHILD:
            return self.child
        if ticket_type is TicketType.INFANT:
            return 0
        raise ValueError(f"Unknown ticket type: {ticket_type!r}")


@dataclass(frozen=True)
class PurchaseSummary:
    """Totals derived from one batch of ticket requests.

    Exists only for the duration of a purchase; never persisted.
    """

    total_price: int
    total_seats: int
    total_tickets: int
    has_adult: bool
