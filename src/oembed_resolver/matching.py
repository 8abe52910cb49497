"""
URL scheme matching for provider endpoints.

Provider catalogs describe supported URLs with wildcard patterns such as
``https://*.flickr.com/photos/*``. The matcher is single-pass and does not
backtrack: while positioned on a ``*`` it keeps consuming URL characters
until the character after the ``*`` equals the next URL character.
"""

from __future__ import annotations

from typing import Optional

WILDCARD = "*"


def _at(s: str, index: int) -> Optional[str]:
    return s[index] if index < len(s) else None


def url_matches_scheme(url: str, scheme: str) -> bool:
    """
    Check whether ``url`` matches the wildcard ``scheme``.

    Args:
        url: Resource URL to test.
        scheme: Pattern where ``*`` stands for a run of URL characters.

    Returns:
        True if the whole URL is consumed by the pattern.
    """
    pos = 0

    for i, url_char in enumerate(url):
        current = _at(scheme, pos)

        if current == WILDCARD:
            # Stay on the wildcard unless the lookahead characters agree.
            if _at(scheme, pos + 1) != _at(url, i + 1):
                continue
        elif current is None or current != url_char:
            return False

        pos += 1

    # Only wildcards may remain once the url is exhausted.
    return not scheme[pos:].strip(WILDCARD)
