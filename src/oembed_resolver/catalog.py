"""
Provider catalog wire format and loaders.

A catalog is a JSON array of provider objects, as published at
https://oembed.com/providers.json. Locally maintained catalogs may also be
written in YAML with the same structure.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Iterable, Tuple, Union

import yaml
from pydantic import TypeAdapter, ValidationError

from .errors import CatalogError, ParseFailure
from .models import Provider

logger = logging.getLogger(__name__)

PROVIDERS_URL = "https://oembed.com/providers.json"
INCLUDED_CATALOG = "providers.json"

_providers_adapter = TypeAdapter(Tuple[Provider, ...])


def parse_providers(body: Union[str, bytes]) -> Tuple[Provider, ...]:
    """
    Parse a JSON catalog body into providers, preserving order.

    Raises:
        ParseFailure: If the body is not a valid catalog
    """
    try:
        return _providers_adapter.validate_json(body)
    except ValidationError as e:
        logger.error(f"Invalid provider catalog: {e}")
        raise ParseFailure("provider catalog", e) from e


def dump_providers(providers: Iterable[Provider], indent: int = 2) -> str:
    """
    Serialize providers into the catalog wire format.
    """
    data = _providers_adapter.dump_python(
        tuple(providers), mode="json", by_alias=True, exclude_none=True
    )
    return json.dumps(data, indent=indent, ensure_ascii=False)


def load_catalog_file(path: Path) -> Tuple[Provider, ...]:
    """
    Load providers from a ``.json``, ``.yml`` or ``.yaml`` catalog file.

    Raises:
        FileNotFoundError: If the file does not exist
        ParseFailure: If the file content is not a valid catalog
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() not in (".yml", ".yaml"):
        return parse_providers(text)

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.error(f"Invalid YAML in {path}: {e}")
        raise ParseFailure(f"provider catalog {path}", e) from e

    try:
        return _providers_adapter.validate_python(raw)
    except ValidationError as e:
        logger.error(f"Invalid provider catalog in {path}: {e}")
        raise ParseFailure(f"provider catalog {path}", e) from e


@lru_cache(maxsize=1)
def included_providers() -> Tuple[Provider, ...]:
    """
    Providers from the catalog bundled with this package.

    Raises:
        CatalogError: If the bundled catalog is missing or corrupt
    """
    try:
        body = files(__package__).joinpath("data").joinpath(INCLUDED_CATALOG).read_text(
            encoding="utf-8"
        )
        providers = parse_providers(body)
    except (OSError, ParseFailure) as e:
        raise CatalogError(
            f"Failed to load bundled {INCLUDED_CATALOG}; this installation is broken"
        ) from e

    logger.debug("Loaded %d bundled providers", len(providers))
    return providers
