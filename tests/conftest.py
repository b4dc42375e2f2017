from __future__ import annotations

import logging
from typing import Dict, List, Optional

import pytest
import requests

from ror2_item_scraper.utils.logging_utils import PACKAGE_LOGGER


EXPANSION_ICON_HREF = "/wiki/Survivors_of_the_Void"


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200, url: str = "") -> None:
        self.text = text
        self.status_code = status_code
        self.url = url

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}")


class FakeSession:
    """Serves canned pages by URL and records every request."""

    def __init__(self, pages: Dict[str, str]) -> None:
        self.pages = pages
        self.requested: List[str] = []
        self.timeouts: List[Optional[float]] = []

    def get(self, url: str, timeout: Optional[float] = None) -> FakeResponse:
        self.requested.append(url)
        self.timeouts.append(timeout)
        if url not in self.pages:
            return FakeResponse("Not Found", status_code=404, url=url)
        return FakeResponse(self.pages[url], url=url)


def _row(table_idx: int, row_idx: int, n_links: int) -> str:
    name_href = f"/wiki/Item_{table_idx}_{row_idx}"
    anchors = [
        f'<a href="/wiki/File:Item_{table_idx}_{row_idx}.png"><img src="x.png"/></a>',
        f'<a href="{name_href}">Item {table_idx} {row_idx}</a>',
    ]
    if n_links == 3:
        anchors.insert(0, f'<a href="{EXPANSION_ICON_HREF}"><img src="dlc.png"/></a>')
    else:
        anchors = anchors[:n_links]
    return f"<tr><td>{''.join(anchors)}</td><td>Some effect</td></tr>"


def build_index_html(tables: List[List[int]], with_tbody: bool = True) -> str:
    """
    One article-table per entry; each entry lists the link count of every row.
    Every table also gets a header row without links.
    """
    parts = ["<html><head><title>Items | Risk of Rain 2 Wiki</title></head><body>"]
    for t, rows in enumerate(tables):
        body = "<tr><th>Item</th><th>Description</th></tr>"
        body += "".join(_row(t, r, n) for r, n in enumerate(rows))
        if with_tbody:
            body = f"<tbody>{body}</tbody>"
        parts.append(f'<table class="article-table sortable">{body}</table>')
    parts.append("</body></html>")
    return "".join(parts)


def build_detail_html(
    name: str = "Lost Seer's Lenses",
    image: str = "https://static.wikia.nocookie.net/riskofrain2/images/lenses.png",
    caption: str = "Chance to instantly kill an enemy.",
    desc: str = "Your attacks have a 0.5% chance to instantly kill a non-Boss enemy.",
    categories_cell: str = (
        '<a href="/wiki/Category:Damage">Damage</a>, '
        '<a href="/wiki/Category:Void_Items">Void Items</a>'
    ),
    with_infobox: bool = True,
) -> str:
    if not with_infobox:
        return "<html><body><p>This page has been moved.</p></body></html>"
    return (
        "<html><head><title>Item page</title></head><body>"
        '<table class="infoboxtable">'
        f'<tr><th class="infoboxname" colspan="2">{name}</th></tr>'
        f'<tr><td colspan="2"><a class="image" href="/wiki/File:x.png"><img src="{image}"/></a></td></tr>'
        f'<tr><td class="infoboxcaption" colspan="2">{caption}</td></tr>'
        f'<tr><td class="infoboxdesc" colspan="2">{desc}</td></tr>'
        "<tr><td>Rarity</td><td>Void</td></tr>"
        f"<tr><td>Category</td><td>{categories_cell}</td></tr>"
        "<tr><td>ID</td><td>ItemIndex.CritGlassesVoid</td></tr>"
        "</table>"
        "</body></html>"
    )


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def index_html():
    return build_index_html


@pytest.fixture
def detail_html():
    return build_detail_html


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers a script run attached, so later tests never log to a closed stream."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
