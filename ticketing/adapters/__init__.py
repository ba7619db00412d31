"""External adapters for the ticketing system.

This package contains the implementations of the core driven ports
that talk to third-party services.

Adapter Organization:

- seat_reservation/: Adapters for reserving seats with a booking provider
- payment/: Adapters for charging accounts through a payment gateway
"""
