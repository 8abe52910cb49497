"""
Exception hierarchy for oEmbed resolution.

``EncodeFailure``, ``RetrievalFailure`` and ``ParseFailure`` are the normal,
reportable failures of a fetch. ``CatalogError`` signals a broken bundled
catalog and is deliberately not an ``OEmbedError``.
"""

from typing import Any, Dict, List, Optional


class OEmbedError(Exception):
    """Base class for failures while fetching an oEmbed resource."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class EncodeFailure(OEmbedError):
    """The transport could not URL-encode the resource URL."""

    def __init__(self, url: str, cause: BaseException):
        super().__init__(f"Failed to URL-encode {url!r}: {cause}", cause)
        self.url = url


class RetrievalFailure(OEmbedError):
    """The transport could not retrieve a document."""

    def __init__(self, url: str, cause: BaseException):
        super().__init__(f"Failed to retrieve {url}: {cause}", cause)
        self.url = url


class ParseFailure(OEmbedError):
    """A response or catalog body did not match the expected wire format."""

    def __init__(self, what: str, cause: BaseException):
        super().__init__(f"Failed to parse {what}: {cause}", cause)
        self.what = what

    def errors(self) -> List[Dict[str, Any]]:
        """
        Structured diagnostics of the underlying parser.

        For pydantic validation errors this is the list of error dicts, each
        carrying the ``loc`` of the offending field. Other parsers yield a
        single entry with the message.
        """
        errors = getattr(self.cause, "errors", None)
        if callable(errors):
            return errors()
        return [{"msg": str(self.cause)}]


class CatalogError(RuntimeError):
    """The bundled provider catalog is missing or corrupt."""
