"""Pydantic Schemas: request/response contracts for the movie endpoints.

Design Decisions:
    - Separate from core.domain_types: schemas are API contracts, Movie is the stored record
"""
