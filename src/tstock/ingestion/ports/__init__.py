"""Ports for the ingestion layer."""

from .http import HttpResponse, IHttpClient, TransportError  # noqa: F401

__all__ = [
    "IHttpClient",
    "HttpResponse",
    "TransportError",
]
