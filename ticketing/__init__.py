"""Ticket purchase validation, pricing and checkout."""
