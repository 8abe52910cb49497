"""
oembed-resolver: oEmbed provider matching and response resolution.

Modules
-------
- matching:   URL scheme wildcard matcher
- models:     Provider, Endpoint and Response data model
- schema:     Provider catalog lookup and fetch orchestration
- catalog:    Catalog wire format and bundled catalog
- transport:  Transport protocol and a requests-based implementation
- errors:     Exception hierarchy

Example
-------
>>> from oembed_resolver import RequestsTransport, Schema
>>> schema = Schema.load_included()
>>> with RequestsTransport() as transport:  # doctest: +SKIP
...     response = schema.fetch(transport, "https://www.flickr.com/photos/bees/2341623661/")
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("oembed-resolver")
except PackageNotFoundError:  # local editable install
    __version__ = "0.0.0-dev"

from .errors import (
    CatalogError,
    EncodeFailure,
    OEmbedError,
    ParseFailure,
    RetrievalFailure,
)
from .matching import url_matches_scheme
from .models import (
    Endpoint,
    LinkType,
    PhotoType,
    Provider,
    Response,
    ResponseType,
    RichType,
    VideoType,
)
from .schema import MatchedEndpoint, Schema
from .transport import RequestsTransport, Transport

__all__ = [
    "CatalogError",
    "EncodeFailure",
    "Endpoint",
    "LinkType",
    "MatchedEndpoint",
    "OEmbedError",
    "ParseFailure",
    "PhotoType",
    "Provider",
    "RequestsTransport",
    "Response",
    "ResponseType",
    "RetrievalFailure",
    "RichType",
    "Schema",
    "Transport",
    "VideoType",
    "url_matches_scheme",
]
