"""Seat reservation adapters.

Implementations reserve seats with an external booking provider:
- Stdout (logs and prints each reservation, no external call)
"""
