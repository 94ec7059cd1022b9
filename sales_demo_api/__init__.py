"""
Top-level package for the Sales Demo API.

The package provides no public exports; the FastAPI application and
its building blocks live in submodules under ``app``.
"""

__all__ = []
