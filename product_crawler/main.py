# product_crawler/main.py
import logging
from pathlib import Path
from typing import Optional

from . import config
from .delegates import DownloaderDelegate, FileManagerDelegate, PageFetcherDelegate
from .pipeline import ProductCrawler

logger = logging.getLogger(__name__)


def main(data_path: Optional[Path] = None) -> Path:
    """The main orchestrator: crawl every search page, then write the CSV export."""

    file_manager = FileManagerDelegate(
        base_path=data_path or config.DATA_PATH,
        csv_filename=config.CSV_FILENAME,
        csv_headers=config.CSV_HEADERS,
        images_dirname=config.IMAGES_DIRNAME,
        image_extension=config.IMAGE_EXTENSION,
    )

    with PageFetcherDelegate() as fetcher, DownloaderDelegate() as downloader:
        crawler = ProductCrawler(
            fetcher=fetcher,
            downloader=downloader,
            file_manager=file_manager,
            base_url=config.BASE_URL,
            base_search_url=config.BASE_SEARCH_URL,
            catalog_number_marker=config.CATALOG_NUMBER_MARKER,
        )
        # Nothing is written until the whole crawl is done.
        records = crawler.crawl()

    csv_path = file_manager.save_products_csv(records)

    stats = crawler.stats
    logger.info(
        "Pages: %d | products: %d | saved: %d | dropped: %d | images: %d ok, %d failed",
        stats.pages_fetched,
        stats.products_seen,
        stats.records_collected,
        stats.products_dropped,
        stats.images_downloaded,
        stats.images_failed,
    )
    logger.info("Main crawler process finished.")
    return csv_path
