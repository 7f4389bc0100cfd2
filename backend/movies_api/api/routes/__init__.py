"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with tags; main.py supplies the /api prefix
"""
