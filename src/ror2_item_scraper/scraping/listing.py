# src/ror2_item_scraper/scraping/listing.py
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from ror2_item_scraper.scraping.errors import StructureError
from ror2_item_scraper.scraping.models import ITEM_CATEGORIES, InclusionPolicy, ItemCategory

logger = logging.getLogger(__name__)


ITEM_TABLE_SELECTOR = "table.article-table"
ROW_GROUP_SELECTOR = f"{ITEM_TABLE_SELECTOR}, {ITEM_TABLE_SELECTOR} tbody"


def find_item_tables(soup: BeautifulSoup) -> List[Tag]:
    """
    Row groups of every item table, in document order.

    html.parser keeps tbody only when the markup has one, so a table
    without it is used as its own row group. Nested item tables yield each
    row group once.
    """
    groups: List[Tag] = []
    for el in soup.select(ROW_GROUP_SELECTOR):
        if el.name == "tbody" or el.find("tbody", recursive=False) is None:
            groups.append(el)
    return groups


def row_links(tr: Tag) -> List[Tag]:
    first_cell = tr.find(["td", "th"], recursive=False)
    if first_cell is None:
        return []
    return first_cell.find_all("a")


def classify_row(links: List[Tag], policy: InclusionPolicy) -> Optional[str]:
    """
    Return the item page href for a row the policy keeps, else None.

    Rows with three links carry the expansion icon as their first link.
    """
    if len(links) < 2:
        return None

    is_expansion_row = len(links) == 3
    if is_expansion_row:
        links = links[1:]

    if policy is InclusionPolicy.EXPANSION_ONLY and not is_expansion_row:
        return None
    if policy is InclusionPolicy.ALL and is_expansion_row:
        return None

    return links[1].get("href", "")


def extract_item_links(
    soup: BeautifulSoup,
    base_url: str,
    policy: InclusionPolicy,
) -> Dict[ItemCategory, List[str]]:
    tables = find_item_tables(soup)
    if not tables:
        raise StructureError("No tables found")

    logger.info(f"Found {len(tables)} item tables")
    if len(tables) != len(ITEM_CATEGORIES):
        logger.warning(
            f"Expected {len(ITEM_CATEGORIES)} item tables, found {len(tables)}; "
            "categories are assigned by position and may be wrong."
        )

    item_links: Dict[ItemCategory, List[str]] = {c: [] for c in ITEM_CATEGORIES}

    for category_index, tbody in enumerate(tables):
        if category_index >= len(ITEM_CATEGORIES):
            logger.warning(f"Ignoring item table #{category_index + 1}: no category left")
            continue
        category = ITEM_CATEGORIES[category_index]

        for tr in tbody.find_all("tr"):
            href = classify_row(row_links(tr), policy)
            if href is None:
                continue
            item_links[category].append(f"{base_url}{href}")

    for category, links in item_links.items():
        logger.info(f"[{category.value}] {len(links)} item links")

    return item_links
