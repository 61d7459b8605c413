# product_crawler/delegates/__init__.py

# This file makes the delegate classes directly available from the 'delegates' package.
# Instead of: from product_crawler.delegates.page_fetcher_delegate import PageFetcherDelegate
# We can now use: from product_crawler.delegates import PageFetcherDelegate

from .page_fetcher_delegate import PageFetcherDelegate
from .downloader_delegate import DownloaderDelegate
from .file_manager_delegate import FileManagerDelegate
