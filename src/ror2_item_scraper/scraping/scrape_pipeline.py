# src/ror2_item_scraper/scraping/scrape_pipeline.py
from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import requests
from bs4 import BeautifulSoup

from ror2_item_scraper.scraping.config import DEFAULT_TIMEOUT, ScrapingConfig, load_scraping_config
from ror2_item_scraper.scraping.detail import extract_item_info
from ror2_item_scraper.scraping.errors import NetworkError
from ror2_item_scraper.scraping.listing import extract_item_links
from ror2_item_scraper.scraping.models import ID_OFFSET, ITEM_CATEGORIES, InclusionPolicy, ItemCategory

logger = logging.getLogger(__name__)


START_BANNER = "--------------------- START OUTPUT ---------------------"
END_BANNER = "---------------------  END OUTPUT  ---------------------"


# ---------------------- FETCH / PARSE ----------------------


def build_session(cfg: ScrapingConfig) -> requests.Session:
    session = requests.Session()
    if cfg.user_agent:
        session.headers.update({"User-Agent": cfg.user_agent})
    return session


def fetch_html(session: requests.Session, url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise NetworkError(f"GET {url} failed: {e}") from e
    return resp.text


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


# ---------------------- INDEX PAGE ----------------------


def scrape_index(session: requests.Session, cfg: ScrapingConfig) -> Dict[ItemCategory, List[str]]:
    logger.info(f"Getting page from {cfg.items_url}")
    soup = parse_html(fetch_html(session, cfg.items_url, timeout=cfg.timeout))
    logger.info("Received page data")

    title = soup.find("title")
    logger.info(f"Page title: {title.get_text() if title else '<none>'}")

    policy = InclusionPolicy.from_flag(cfg.expansion_only)
    return extract_item_links(soup, cfg.base_url, policy)


# ---------------------- ITEM PAGES ----------------------


def crawl_items(
    item_links: Dict[ItemCategory, List[str]],
    session: requests.Session,
    cfg: ScrapingConfig,
    sleep: Callable[[float], None] = time.sleep,
) -> Dict[str, Dict[str, Any]]:
    """
    Visit every item page in category order and build the id -> item map.

    Ids are handed out sequentially from ID_OFFSET + 1. The first failure
    aborts the crawl; nothing collected so far is returned.
    """
    content: Dict[str, Dict[str, Any]] = {}
    item_id = ID_OFFSET

    for category in ITEM_CATEGORIES:
        for link in item_links.get(category, []):
            item_id += 1
            logger.info(f"Polling URL {link}")

            soup = parse_html(fetch_html(session, link, timeout=cfg.timeout))
            item = extract_item_info(soup, item_id, category)
            content[str(item_id)] = item.to_dict()

            # stay under the wiki's rate limit
            sleep(cfg.interval_seconds)

    logger.info(f"Collected {len(content)} items")
    return content


def render_output(content: Dict[str, Dict[str, Any]]) -> str:
    return "\n".join(
        [
            START_BANNER,
            json.dumps(content, indent=2, ensure_ascii=False),
            END_BANNER,
        ]
    )


# ---------------------- PUBLIC ENTRYPOINT ----------------------


def run_item_scrape(
    config_path: Optional[Path] = None,
    sleep: Callable[[float], None] = time.sleep,
    session: Optional[requests.Session] = None,
) -> Dict[str, Dict[str, Any]]:
    """
    High-level: load config, collect item links from the index page,
    then scrape every item page. Returns the id -> item map.
    """
    cfg = load_scraping_config(config_path)
    logger.info(
        f"Starting item scrape for domain={cfg.domain} "
        f"(expansion_only={cfg.expansion_only}, interval_ms={cfg.interval_ms})"
    )

    if session is None:
        session = build_session(cfg)

    item_links = scrape_index(session, cfg)
    content = crawl_items(item_links, session, cfg, sleep=sleep)
    logger.info("Finished item scrape.")
    return content
