"""
Core calendar primitives, domain models, and contracts.

This module contains the foundational building blocks that are independent
of external systems: weekday seeking, the 4-4-5 fiscal calendar, and the
JSON contracts for serialized fiscal periods.
"""
