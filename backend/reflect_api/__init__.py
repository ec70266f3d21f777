"""Reflect API Simulator — deterministic stand-in for the Reflect protocol REST API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
