"""
Pydantic schema definitions for API payloads.

Request bodies and response records are declared here, separately
from the service that stores them, so the wire format can evolve
without touching the storage logic.
"""
