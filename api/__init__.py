"""
oEmbed resolver REST API package.

This package defines a FastAPI application that resolves resource URLs
through the provider catalog and proxies the providers' oEmbed responses.
"""

from .server import app  # noqa: F401
