"""Collision-free slug allocation for companies."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from company_directory.services.errors import InvalidInput, SlugTaken
from company_directory.stores.ports import RecordStore
from company_directory.utils.slug import create_slug, slug_candidates

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SlugAllocator:
    """
    Allocates unique, URL-safe company slugs.

    The base slug is the slugified display name. When it is taken, ``-1``,
    ``-2``, ... are appended until a free candidate is found, so the first
    "Acme Co" gets ``acme-co``, the second ``acme-co-1`` and so on.

    ``claim`` is the write path: each candidate is handed to a conditional
    write that fails with ``SlugTaken`` instead of overwriting, so two
    concurrent allocations for the same name can never both win the same slug.
    """

    def __init__(self, records: RecordStore) -> None:
        """
        Initialize the allocator.

        Args:
            records: Store used to look up existing slugs
        """
        self.records = records

    @staticmethod
    def base_slug(name: str) -> str:
        """
        Return the base slug for a display name.

        Raises:
            InvalidInput: If the name has no letters or digits to build a slug from
        """
        base = create_slug(name or "")
        if not base:
            raise InvalidInput("company name must contain at least one letter or digit")
        return base

    def allocate(self, name: str) -> str:
        """
        Return the first candidate slug not used by any company right now.

        This is a read-only lookup; use ``claim`` when the slug is about to be
        written.

        Args:
            name: Company display name

        Returns:
            An unused slug
        """
        candidates = slug_candidates(self.base_slug(name))
        while True:
            candidate = next(candidates)
            if self.records.find_company_by_slug(candidate) is None:
                return candidate
            logger.debug("Slug %s is taken", candidate)

    def claim(self, name: str, write: Callable[[str], T]) -> T:
        """
        Write a record under the first slug candidate the store accepts.

        Args:
            name: Company display name
            write: Conditional insert/update for one candidate; must raise
                SlugTaken when the candidate is already in use

        Returns:
            Whatever ``write`` returned for the winning candidate
        """
        candidates = slug_candidates(self.base_slug(name))
        while True:
            candidate = next(candidates)
            try:
                result = write(candidate)
            except SlugTaken:
                logger.debug("Slug %s is taken, trying next candidate", candidate)
                continue
            logger.info("Allocated slug %s for %r", candidate, name)
            return result
