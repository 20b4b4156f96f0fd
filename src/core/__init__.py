"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the pricing and
settlement core. They are independent of external systems (payment
providers, storage, the booking UI).
"""
