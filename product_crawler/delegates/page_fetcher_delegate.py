# product_crawler/delegates/page_fetcher_delegate.py
import logging
from typing import Optional

import httpx
from lxml import etree, html

logger = logging.getLogger(__name__)


class PageFetcherDelegate:
    """Handles fetching a page over plain GET and parsing it into an lxml tree."""
    def __init__(self, client: Optional[httpx.Client] = None):
        # A client can be handed in (tests use one backed by httpx.MockTransport).
        # Otherwise one is created in __enter__ and closed in __exit__.
        self.client = client
        self._owns_client = client is None

    def __enter__(self):
        if self.client is None:
            self.client = httpx.Client()
            logger.debug("PageFetcherDelegate httpx.Client initialized.")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.client and self._owns_client:
            self.client.close()
            self.client = None
            logger.debug("PageFetcherDelegate httpx.Client closed.")

    def fetch_page(self, url: str) -> Optional[html.HtmlElement]:
        """
        Downloads the page at `url` and returns the parsed document root,
        or None when the request fails or the body is not a usable HTML document.
        """
        if not self.client:
            logger.error("HTTP client not initialized. Cannot fetch %s.", url)
            return None

        try:
            response = self.client.get(url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Error fetching page %s: HTTP %s", url, e.response.status_code)
            return None
        except httpx.RequestError as e:
            logger.error("Error fetching page %s: %s", url, e)
            return None
        except httpx.InvalidURL as e:
            # Scraped hrefs can carry stray tabs or newlines.
            logger.error("Invalid page URL %r: %s", url, e)
            return None

        try:
            # Bytes, so lxml can honour an <?xml encoding=...?> or <meta charset> in the page.
            # A charset from the Content-Type header wins when there is one.
            parser = html.HTMLParser(encoding=response.charset_encoding)
            document = html.document_fromstring(response.content, parser=parser)
        except (etree.LxmlError, LookupError, ValueError) as e:
            logger.error("Error parsing page %s: %s", url, e)
            return None

        logger.debug("Fetched %s (%d bytes).", url, len(response.content))
        return document
