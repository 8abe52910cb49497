"""
Provider schema: endpoint lookup and fetch orchestration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

from .catalog import (
    PROVIDERS_URL,
    dump_providers,
    included_providers,
    load_catalog_file,
    parse_providers,
)
from .errors import RetrievalFailure
from .models import Endpoint, Provider, Response
from .transport import Transport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchedEndpoint:
    """
    Result of an endpoint search.
    """

    provider: Provider
    endpoint: Endpoint
    # The scheme that caused this match
    matched_scheme: str

    def fetch(self, transport: Transport, url: str) -> Response:
        return self.endpoint.fetch(transport, url)


class Schema:
    """
    Ordered, read-only collection of known oEmbed providers.

    Lookups are a linear scan in catalog order and the first matching
    scheme wins, so the order of providers, endpoints and schemes decides
    which endpoint serves a URL claimed by several of them.
    """

    __slots__ = ("_providers",)

    def __init__(self, providers: Iterable[Provider] = ()):
        self._providers: Tuple[Provider, ...] = tuple(providers)

    @classmethod
    def load_included(cls) -> "Schema":
        """
        Load providers from the catalog bundled with this package.

        The bundled catalog is a snapshot and may be out of date; use
        :meth:`fetch_latest` or :meth:`fetch_from_url` for a current one.

        Raises:
            CatalogError: If the bundled catalog can't be parsed
        """
        return cls(included_providers())

    @classmethod
    def fetch_latest(cls, transport: Transport) -> "Schema":
        """
        Load providers from the public list at https://oembed.com/providers.json.
        """
        return cls.fetch_from_url(transport, PROVIDERS_URL)

    @classmethod
    def fetch_from_url(cls, transport: Transport, url: str) -> "Schema":
        """
        Load providers from the catalog at ``url``.

        Raises:
            RetrievalFailure: If the transport failed to retrieve the catalog
            ParseFailure: If the catalog is malformed
        """
        logger.info("Fetching provider catalog from %s", url)
        try:
            body = transport.get(url)
        except Exception as e:
            logger.error(f"Failed to fetch provider catalog from {url}: {e}")
            raise RetrievalFailure(url, e) from e

        schema = cls(parse_providers(body))
        logger.info("Loaded %d providers from %s", len(schema), url)
        return schema

    @classmethod
    def from_file(cls, path: Path) -> "Schema":
        """
        Load providers from a local JSON or YAML catalog file.
        """
        return cls(load_catalog_file(path))

    @property
    def providers(self) -> Tuple[Provider, ...]:
        return self._providers

    def match_endpoint(self, url: str) -> Optional[MatchedEndpoint]:
        """
        Search for the first endpoint with a scheme matching ``url``.
        """
        for provider in self._providers:
            for endpoint in provider.endpoints:
                matched_scheme = endpoint.match_url_scheme(url)
                if matched_scheme is not None:
                    logger.debug(
                        "Matched %s to %s via %s", url, provider.name, matched_scheme
                    )
                    return MatchedEndpoint(provider, endpoint, matched_scheme)

        logger.debug("No endpoint matches %s", url)
        return None

    def fetch(self, transport: Transport, url: str) -> Optional[Response]:
        """
        Fetch an oEmbed response for ``url``.

        Returns:
            The response, or None if no endpoint has a scheme matching ``url``

        Raises:
            EncodeFailure, RetrievalFailure, ParseFailure: If a matching
            endpoint was found but fetching from it failed
        """
        matched = self.match_endpoint(url)
        if matched is None:
            return None
        return matched.fetch(transport, url)

    def dump_json(self, indent: int = 2) -> str:
        """Serialize the schema into the catalog wire format."""
        return dump_providers(self._providers, indent=indent)

    def __len__(self) -> int:
        return len(self._providers)

    def __iter__(self) -> Iterator[Provider]:
        return iter(self._providers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self._providers == other._providers

    def __hash__(self) -> int:
        return hash(self._providers)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(providers={len(self._providers)})"
