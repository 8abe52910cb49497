"""
Fixtures and test configuration for the oembed-resolver test suite.
"""

import json
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from oembed_resolver.models import Endpoint, Provider
from oembed_resolver.schema import Schema


class StubTransport:
    """
    In-memory transport returning canned bodies and recording every call.
    """

    def __init__(
        self,
        body: str = "",
        bodies: Optional[Dict[str, str]] = None,
        encode_error: Optional[Exception] = None,
        get_error: Optional[Exception] = None,
    ):
        self.body = body
        self.bodies = bodies or {}
        self.encode_error = encode_error
        self.get_error = get_error
        self.encoded: List[str] = []
        self.requested: List[str] = []

    def url_encode(self, s: str) -> str:
        self.encoded.append(s)
        if self.encode_error:
            raise self.encode_error
        return s

    def get(self, url: str) -> str:
        self.requested.append(url)
        if self.get_error:
            raise self.get_error
        return self.bodies.get(url, self.body)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def photo_payload():
    """Sample photo response from the oEmbed specification."""
    return {
        "version": "1.0",
        "type": "photo",
        "width": 240,
        "height": 160,
        "title": "ZB8T0193",
        "url": "http://farm4.static.flickr.com/3123/2341623661_7c99f48bbf_m.jpg",
        "author_name": "Bees",
        "author_url": "http://www.flickr.com/photos/bees/",
        "provider_name": "Flickr",
        "provider_url": "http://www.flickr.com/",
    }


@pytest.fixture
def photo_json(photo_payload):
    return json.dumps(photo_payload)


@pytest.fixture
def video_payload():
    return {
        "version": "1.0",
        "type": "video",
        "html": '<iframe width="480" height="270" src="https://www.youtube.com/embed/5mMOsl8qpfc"></iframe>',
        "width": 480,
        "height": 270,
        "title": "Sample video",
        "provider_name": "YouTube",
        "provider_url": "https://www.youtube.com/",
        "thumbnail_url": "https://i.ytimg.com/vi/5mMOsl8qpfc/hqdefault.jpg",
        "thumbnail_width": 480,
        "thumbnail_height": 360,
    }


@pytest.fixture
def flickr_schema():
    """One-provider schema for Flickr."""
    return Schema(
        [
            Provider(
                name="Flickr",
                url="https://www.flickr.com/",
                endpoints=[
                    Endpoint(
                        url="https://flickr.com/oembed",
                        schemes=["https://*.flickr.com/*"],
                    )
                ],
            )
        ]
    )


@pytest.fixture
def catalog_payload():
    """Catalog in wire format with two providers claiming the same URLs."""
    return [
        {
            "provider_name": "First",
            "provider_url": "https://first.example",
            "endpoints": [
                {"url": "https://first.example/no-schemes"},
                {
                    "url": "https://first.example/oembed",
                    "schemes": ["https://media.example/a/*", "https://media.example/*"],
                    "formats": ["json"],
                },
            ],
        },
        {
            "provider_name": "Second",
            "provider_url": "https://second.example",
            "endpoints": [
                {
                    "url": "https://second.example/oembed",
                    "schemes": ["https://media.example/*"],
                    "discovery": True,
                }
            ],
        },
    ]


@pytest.fixture
def catalog_file(temp_dir, catalog_payload):
    path = temp_dir / "providers.json"
    path.write_text(json.dumps(catalog_payload), encoding="utf-8")
    return path


@pytest.fixture
def stub_transport():
    return StubTransport
