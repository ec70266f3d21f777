"""Route Modules — one file per resource family.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to core handlers)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
