# src/ror2_item_scraper/scraping/errors.py
from __future__ import annotations


class ScraperError(Exception):
    """Base class for everything the item scraper raises on purpose."""


class NetworkError(ScraperError):
    """A page could not be fetched (connection failure, timeout, non-2xx)."""


class StructureError(ScraperError):
    """The index page does not contain any item tables."""


class FieldExtractionError(ScraperError):
    """A detail page is missing its infobox or one of the infobox fields."""
