"""
Application package for the Sales Demo API.

``core`` holds configuration, logging, the dataset generator and the
record store; ``schemas`` the pydantic models; ``services`` the query
engine and the response envelopes; ``api`` the versioned routers.
"""

from .main import app  # noqa: F401
