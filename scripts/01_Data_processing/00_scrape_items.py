#!/usr/bin/env python3
"""
00_scrape_items.py

Scrapes the Risk of Rain 2 wiki item list:
- Reads configs/scraping.yaml (built-in defaults if absent)
- Collects item page links from the Items page tables
- Pulls name / image / descriptions / categories from every item page
- Prints the id -> item map as JSON between START/END OUTPUT banners

Exits with status 1 when the Items page has no item tables.
"""

import sys
import time

from ror2_item_scraper.scraping.config import PROJECT_ROOT
from ror2_item_scraper.scraping.errors import StructureError
from ror2_item_scraper.scraping.scrape_pipeline import render_output, run_item_scrape
from ror2_item_scraper.utils.logging_utils import create_logger


def main() -> None:
    log_dir = PROJECT_ROOT / "data" / "logs" / "scraping"
    logger, log_path = create_logger(log_dir=log_dir, script_name="00_scrape_items")

    start = time.time()
    logger.info("=== Starting 00_scrape_items ===")

    try:
        content = run_item_scrape()
    except StructureError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unhandled error in 00_scrape_items: {e}", exc_info=True)
        raise

    print(render_output(content))

    elapsed = time.time() - start
    logger.info(f"Finished 00_scrape_items in {elapsed:.2f} seconds")
    logger.info(f"Log file: {log_path}")

    print("Finished :)")


if __name__ == "__main__":
    main()
