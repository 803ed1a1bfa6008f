"""Slug generation utilities."""

from collections.abc import Iterator
from itertools import count

from slugify import slugify


def create_slug(text: str) -> str:
    """
    Create a URL-friendly slug from text.

    Args:
        text: The text to convert to a slug

    Returns:
        A lowercase, hyphenated slug

    Examples:
        >>> create_slug("Acme Co")
        'acme-co'
        >>> create_slug("AT&T Inc.")
        'at-t-inc'
    """
    return slugify(text, lowercase=True, separator="-")


def slug_candidates(base: str) -> Iterator[str]:
    """
    Yield the slug candidates for a base slug, in allocation order.

    Examples:
        >>> from itertools import islice
        >>> list(islice(slug_candidates("acme-co"), 3))
        ['acme-co', 'acme-co-1', 'acme-co-2']
    """
    yield base
    for n in count(1):
        yield f"{base}-{n}"
