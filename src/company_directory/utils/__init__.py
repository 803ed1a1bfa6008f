"""Utility functions package."""

from company_directory.utils.slug import create_slug, slug_candidates

__all__ = ["create_slug", "slug_candidates"]
