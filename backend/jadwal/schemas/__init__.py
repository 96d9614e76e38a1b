"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Every response body is an Envelope[T] ({status, message, data})
    - Request models accept missing fields; emptiness is judged by core/validate_input.py
      so that each endpoint controls which "... is required" message wins

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
