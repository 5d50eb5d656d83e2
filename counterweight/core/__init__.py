"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks that are independent
of the presentation layer (forms, export, printing).
"""
