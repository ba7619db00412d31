"""Payment adapters.

Implementations charge accounts through an external payment gateway:
- Stdout (logs and prints each payment, no external call)
"""
