# src/ror2_item_scraper/scraping/detail.py
from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, Tag

from ror2_item_scraper.scraping.errors import FieldExtractionError
from ror2_item_scraper.scraping.models import CategoryTag, Item, ItemCategory


INFOBOX_SELECTOR = ".infoboxtable"


def _select_required(root: Tag, selector: str) -> Tag:
    el = root.select_one(selector)
    if el is None:
        raise FieldExtractionError(f"No element matching {selector!r}")
    return el


def parse_categories(cell: Tag) -> List[CategoryTag]:
    """
    Turn the anchors directly inside a category cell into CategoryTags.
    Text nodes and other elements (separators, line breaks) are dropped.
    """
    return [
        CategoryTag.from_text(href=a.get("href", ""), text_content=a.get_text())
        for a in cell.contents
        if isinstance(a, Tag) and a.name == "a"
    ]


def extract_categories(soup: BeautifulSoup) -> List[CategoryTag]:
    categories: List[CategoryTag] = []
    for td in soup.select("tr > td"):
        if "Category" not in td.get_text():
            continue
        value_cell = td.find_next_sibling()
        if value_cell is None:
            continue
        categories.extend(parse_categories(value_cell))
    return categories


def extract_item_info(soup: BeautifulSoup, item_id: int, item_rarity: ItemCategory) -> Item:
    infobox = _select_required(soup, INFOBOX_SELECTOR)

    image = _select_required(infobox, ".image > img").get("src")
    if image is None:
        raise FieldExtractionError("Infobox image has no src attribute")

    return Item(
        name=_select_required(infobox, ".infoboxname").get_text(),
        image=image,
        short_description=_select_required(infobox, ".infoboxcaption").get_text(),
        description=_select_required(infobox, ".infoboxdesc").get_text(),
        item_rarity=item_rarity,
        id=item_id,
        categories=extract_categories(soup),
    )
