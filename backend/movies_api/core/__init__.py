"""Core Layer: pure domain logic, no IO, no FastAPI.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Repository contracts live here; implementations live in infrastructure/
"""
