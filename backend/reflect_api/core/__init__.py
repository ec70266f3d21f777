"""Core Layer — pure domain logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from api/, schemas/, infrastructure/ or config
    - All functions are pure and deterministic (health timestamps live outside core handlers)

Design Decisions:
    - Functional core separated from imperative shell: handlers return
      (status, Envelope) and routes only render them
"""
