"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain persistence logic (delegate to services)
    - Every entity route is guarded by authorize(resource, action)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
