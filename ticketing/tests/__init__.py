"""Test suite for the ticketing system.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No third-party dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations

3. fakes/: Port implementations for testing
   - In-memory SeatReservationPort and TicketPaymentPort
   - Used by core unit tests
"""
