"""
Data model for oEmbed providers, endpoints and responses.

Wire formats follow https://oembed.com/: providers use the ``providers.json``
layout and responses follow section 2.3.4 of the oEmbed 1.0 specification.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    field_validator,
    model_serializer,
    model_validator,
)

from .errors import EncodeFailure, ParseFailure, RetrievalFailure
from .matching import url_matches_scheme

if TYPE_CHECKING:
    from .transport import Transport

logger = logging.getLogger(__name__)


class Endpoint(BaseModel):
    """
    oEmbed API endpoint of a provider.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Base URL requests are sent to")
    schemes: Optional[Tuple[str, ...]] = Field(
        None, description="Wildcard patterns of resource URLs this endpoint serves"
    )
    formats: Optional[Tuple[str, ...]] = Field(
        None, description="Response formats advertised by the endpoint"
    )
    # Not used: discovery is not supported.
    discovery: Optional[bool] = None

    def match_url_scheme(self, url: str) -> Optional[str]:
        """
        Return the first scheme matching ``url``, or None.
        """
        for scheme in self.schemes or ():
            if url_matches_scheme(url, scheme):
                return scheme
        return None

    def request_url(self, encoded_url: str) -> str:
        return f"{self.url}?format=json&url={encoded_url}"

    def fetch(self, transport: "Transport", url: str) -> "Response":
        """
        Fetch the oEmbed response for ``url`` from this endpoint.

        Args:
            transport: Transport used for encoding and retrieval
            url: Resource URL, unescaped

        Returns:
            Parsed response

        Raises:
            EncodeFailure: The transport failed to encode ``url``
            RetrievalFailure: The transport failed to retrieve the response
            ParseFailure: The response body is not a valid oEmbed response
        """
        try:
            encoded = transport.url_encode(url)
        except Exception as e:
            logger.error(f"Failed to encode {url}: {e}")
            raise EncodeFailure(url, e) from e

        request_url = self.request_url(encoded)
        logger.info("Requesting oEmbed data from %s", request_url)

        try:
            body = transport.get(request_url)
        except Exception as e:
            logger.error(f"Request to {request_url} failed: {e}")
            raise RetrievalFailure(request_url, e) from e

        return Response.from_json(body)


class Provider(BaseModel):
    """
    oEmbed provider and its endpoints, in catalog order.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., alias="provider_name")
    url: str = Field(..., alias="provider_url")
    endpoints: Tuple[Endpoint, ...]


class PhotoType(BaseModel):
    """Static photo."""

    model_config = ConfigDict(frozen=True)

    type: Literal["photo"] = "photo"
    url: str
    width: Optional[StrictInt] = None
    height: Optional[StrictInt] = None


class VideoType(BaseModel):
    """Playable video, embedded as HTML."""

    model_config = ConfigDict(frozen=True)

    type: Literal["video"] = "video"
    html: str
    width: Optional[StrictInt] = None
    height: Optional[StrictInt] = None


class RichType(BaseModel):
    """Rich HTML content that doesn't fit the other types."""

    model_config = ConfigDict(frozen=True)

    type: Literal["rich"] = "rich"
    html: str
    width: Optional[StrictInt] = None
    height: Optional[StrictInt] = None


class LinkType(BaseModel):
    """Generic embed with no type-specific data."""

    model_config = ConfigDict(frozen=True)

    type: Literal["link"] = "link"


ResponseType = Annotated[
    Union[PhotoType, VideoType, RichType, LinkType], Field(discriminator="type")
]

# Wire fields owned by each response type
_VARIANT_FIELDS: Dict[str, Tuple[str, ...]] = {
    "photo": ("url", "width", "height"),
    "video": ("html", "width", "height"),
    "rich": ("html", "width", "height"),
    "link": (),
}


class Response(BaseModel):
    """
    Response of an oEmbed endpoint.

    On the wire the type-specific fields sit next to the common ones; here
    they live on ``response_type``, one of :class:`PhotoType`,
    :class:`VideoType`, :class:`RichType` or :class:`LinkType`.
    """

    model_config = ConfigDict(frozen=True)

    response_type: ResponseType
    version: str
    title: Optional[str] = None
    author_name: Optional[str] = None
    author_url: Optional[str] = None
    provider_name: Optional[str] = None
    provider_url: Optional[str] = None
    cache_age: Optional[str] = None
    thumbnail_url: Optional[str] = None
    thumbnail_width: Optional[StrictInt] = None
    thumbnail_height: Optional[StrictInt] = None

    @model_validator(mode="before")
    @classmethod
    def _lift_type_fields(cls, data: Any) -> Any:
        """Move the flat wire fields of the tagged type into response_type."""
        # Without a "type" tag the data is a keyword construction, not wire input.
        if not isinstance(data, dict) or "type" not in data:
            return data

        data = dict(data)
        data.pop("response_type", None)
        tag = data.pop("type")
        variant: Dict[str, Any] = {"type": tag}
        for name in _VARIANT_FIELDS.get(tag, ()) if isinstance(tag, str) else ():
            if name in data:
                variant[name] = data.pop(name)
        data["response_type"] = variant
        return data

    @field_validator("cache_age", mode="before")
    @classmethod
    def _cache_age_as_str(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @model_serializer(mode="wrap")
    def _flatten(self, handler) -> Dict[str, Any]:
        data = handler(self)
        variant = data.pop("response_type", None) or {}
        return {**variant, **data}

    @property
    def type(self) -> str:
        return self.response_type.type

    @classmethod
    def from_json(cls, body: Union[str, bytes]) -> "Response":
        """
        Parse a JSON response body.

        Raises:
            ParseFailure: If the body is not a valid oEmbed response
        """
        try:
            return cls.model_validate_json(body)
        except ValidationError as e:
            logger.error(f"Invalid oEmbed response: {e}")
            raise ParseFailure("oEmbed response", e) from e

    def to_json(self, exclude_none: bool = True) -> str:
        return self.model_dump_json(exclude_none=exclude_none)
