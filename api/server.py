"""
FastAPI proxy for oEmbed lookups.

Exposes the resolver over HTTP: ``/oembed`` resolves a resource URL to its
provider and returns the provider's oEmbed response, ``/providers/match``
only reports which endpoint would be used. The schema and transport are
FastAPI dependencies and can be overridden.
"""

from functools import lru_cache
from typing import Any, Dict, Iterator

from fastapi import Depends, FastAPI, HTTPException, Query

from oembed_resolver import __version__
from oembed_resolver.errors import OEmbedError, ParseFailure
from oembed_resolver.schema import Schema
from oembed_resolver.settings import settings
from oembed_resolver.transport import RequestsTransport, Transport

app = FastAPI(title="oEmbed Resolver API", version=__version__)


@lru_cache()
def get_schema() -> Schema:
    if settings.catalog_path:
        return Schema.from_file(settings.catalog_path)
    return Schema.load_included()


def get_transport() -> Iterator[Transport]:
    with RequestsTransport.from_settings(settings) as transport:
        yield transport


@app.get("/health", summary="Health check", tags=["system"])
async def health() -> dict[str, str]:
    """Return a simple health check status."""
    return {"status": "ok"}


@app.get("/providers/match", summary="Match a URL to a provider", tags=["oembed"])
def match(
    url: str = Query(..., description="Resource URL"),
    schema: Schema = Depends(get_schema),
) -> Dict[str, Any]:
    """Return the provider endpoint whose scheme matches the URL."""
    matched = schema.match_endpoint(url)
    if matched is None:
        raise HTTPException(status_code=404, detail=f"No provider supports {url}")
    return {
        "provider_name": matched.provider.name,
        "provider_url": matched.provider.url,
        "endpoint": matched.endpoint.url,
        "matched_scheme": matched.matched_scheme,
    }


@app.get("/oembed", summary="Fetch oEmbed data for a URL", tags=["oembed"])
def oembed(
    url: str = Query(..., description="Resource URL"),
    schema: Schema = Depends(get_schema),
    transport: Transport = Depends(get_transport),
) -> Dict[str, Any]:
    """Fetch the oEmbed response for the URL from its provider."""
    try:
        response = schema.fetch(transport, url)
    except ParseFailure as e:
        raise HTTPException(
            status_code=502,
            detail={
                "message": str(e),
                "errors": [
                    {"loc": list(err.get("loc", ())), "msg": err.get("msg")}
                    for err in e.errors()
                ],
            },
        )
    except OEmbedError as e:
        raise HTTPException(status_code=502, detail=str(e))

    if response is None:
        raise HTTPException(status_code=404, detail=f"No provider supports {url}")
    return response.model_dump(mode="json", exclude_none=True)
