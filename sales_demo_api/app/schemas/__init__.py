"""
Pydantic schema definitions for API payloads.

Request models validate input once at the boundary; response models
describe the envelopes returned by every operation.
"""
