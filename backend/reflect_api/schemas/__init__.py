"""Pydantic Schemas — request validation at the API boundary.

Invariants:
    - Body integers are strict and 64-bit bounded (no silent coercion)
    - Schemas only parse; business rules live in core/validation_rules
"""
