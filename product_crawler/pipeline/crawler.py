# product_crawler/pipeline/crawler.py
import logging
from typing import Optional

from lxml import html

from .. import config
from ..delegates import DownloaderDelegate, FileManagerDelegate, PageFetcherDelegate
from ..models import CrawlStats, ProductRecord, ProductSummary, RecordCollection
from .extractors import extract_product_record, extract_product_summaries, find_image_links

logger = logging.getLogger(__name__)


class ProductCrawler:
    """
    Walks the paginated search listing one page at a time, follows every product
    to its detail page, saves the gallery images and collects one ProductRecord
    per product. Everything runs sequentially on the calling thread.
    """
    def __init__(
        self,
        fetcher: PageFetcherDelegate,
        downloader: DownloaderDelegate,
        file_manager: FileManagerDelegate,
        base_url: str = config.BASE_URL,
        base_search_url: str = config.BASE_SEARCH_URL,
        catalog_number_marker: str = config.CATALOG_NUMBER_MARKER,
    ):
        self.fetcher = fetcher
        self.downloader = downloader
        self.file_manager = file_manager
        self.base_url = base_url
        self.base_search_url = base_search_url
        self.catalog_number_marker = catalog_number_marker
        self.stats = CrawlStats()

    def search_page_url(self, page_number: int) -> str:
        return f"{self.base_search_url},{page_number}"

    def crawl(self) -> RecordCollection:
        """
        Runs until a search page can't be fetched or holds no products.
        Returns every record collected so far, in crawl order.
        """
        records = RecordCollection()
        page_number = 1

        while True:
            page_url = self.search_page_url(page_number)
            logger.info("Fetching page: %s", page_url)

            page = self.fetcher.fetch_page(page_url)
            if page is None:
                logger.info("Stopping at page %d: page could not be fetched.", page_number)
                break
            self.stats.pages_fetched += 1

            summaries = extract_product_summaries(page, self.base_url)
            if not summaries:
                logger.info("Stopping at page %d: no products found.", page_number)
                break
            logger.info("Found %d products on page %d.", len(summaries), page_number)

            for summary in summaries:
                self.stats.products_seen += 1
                record = self.fetch_product_details(summary)
                if record is None:
                    self.stats.products_dropped += 1
                    continue
                records.append(record)
                self.stats.records_collected += 1

            page_number += 1

        return records

    def fetch_product_details(self, summary: ProductSummary) -> Optional[ProductRecord]:
        """Fetches and parses one detail page. Returns None when the product has to be skipped."""
        logger.info("Fetching product details: %s", summary.title)
        page = self.fetcher.fetch_page(summary.detail_link)
        if page is None:
            logger.warning("Skipping '%s': detail page unavailable.", summary.title)
            return None

        try:
            record = extract_product_record(page, summary, self.catalog_number_marker)
            self.download_images(page, summary.title)
        except Exception as e:
            logger.error("Error fetching product details for '%s': %s", summary.title, e, exc_info=True)
            return None

        logger.debug("Product record: %s", record)
        return record

    def download_images(self, page: html.HtmlElement, title: str) -> None:
        image_urls = find_image_links(page, self.base_url)
        logger.debug("Found %d gallery images for '%s'.", len(image_urls), title)

        for index, image_url in enumerate(image_urls, start=1):
            destination = self.file_manager.image_path(title, index)
            if self.downloader.download_image(image_url, destination):
                self.stats.images_downloaded += 1
            else:
                self.stats.images_failed += 1
