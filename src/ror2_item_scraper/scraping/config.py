# src/ror2_item_scraper/scraping/config.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import yaml

logger = logging.getLogger(__name__)


# Project root = repo checkout containing configs/ and data/
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "configs" / "scraping.yaml"

DEFAULT_BASE_URL = "https://riskofrain2.fandom.com"
DEFAULT_INTERVAL_MS = 500
DEFAULT_TIMEOUT = 30


@dataclass
class ScrapingConfig:
    base_url: str
    items_url: str
    expansion_only: bool = True
    interval_ms: int = DEFAULT_INTERVAL_MS
    timeout: float = DEFAULT_TIMEOUT
    user_agent: Optional[str] = None

    @property
    def domain(self) -> str:
        return urlparse(self.base_url).netloc.split(".")[0]

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000.0


def default_scraping_config() -> ScrapingConfig:
    return ScrapingConfig(
        base_url=DEFAULT_BASE_URL,
        items_url=f"{DEFAULT_BASE_URL}/wiki/Items",
    )


def load_scraping_config(config_path: Optional[Path] = None) -> ScrapingConfig:
    """
    Load configs/scraping.yaml from project root unless overridden.

    A missing default file falls back to the built-in Risk of Rain 2 settings;
    a missing explicit path is an error.
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.info(f"No config at {DEFAULT_CONFIG_PATH}, using built-in defaults.")
            return default_scraping_config()
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    if "base_url" not in cfg:
        raise ValueError(f"'base_url' must be defined in {config_path}")

    expansion_only = cfg.get("expansion_only", True)
    if not isinstance(expansion_only, bool):
        raise ValueError(
            f"'expansion_only' must be true or false in {config_path}, got {expansion_only!r}"
        )

    base_url = str(cfg["base_url"]).rstrip("/")
    return ScrapingConfig(
        base_url=base_url,
        items_url=cfg.get("items_url") or f"{base_url}/wiki/Items",
        expansion_only=expansion_only,
        interval_ms=int(cfg.get("interval_ms", DEFAULT_INTERVAL_MS)),
        timeout=float(cfg.get("timeout", DEFAULT_TIMEOUT)),
        user_agent=cfg.get("user_agent"),
    )
