"""Movies API package: in-memory movie catalogue served over REST.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
