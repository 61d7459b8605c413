# product_crawler/delegates/downloader_delegate.py
import logging
from pathlib import Path
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class DownloaderDelegate:
    """Handles downloading binary content (product images) straight to disk."""
    def __init__(self, client: Optional[httpx.Client] = None):
        self.client = client
        self._owns_client = client is None

    def __enter__(self):
        if self.client is None:
            self.client = httpx.Client()
            logger.debug("DownloaderDelegate httpx.Client initialized.")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.client and self._owns_client:
            self.client.close()
            self.client = None
            logger.debug("DownloaderDelegate httpx.Client closed.")

    def download_image(self, url: str, destination: Path) -> bool:
        """Streams `url` into `destination`. Returns True on success."""
        if not self.client:
            logger.error("HTTP client not initialized. Cannot download %s.", url)
            return False

        logger.info("Downloading image: %s -> %s", url, destination)
        try:
            with self.client.stream("GET", url, follow_redirects=True) as response:
                response.raise_for_status()
                with destination.open("wb") as f:
                    for chunk in response.iter_bytes():
                        f.write(chunk)
        except httpx.HTTPStatusError as e:
            logger.error("Error downloading image %s: HTTP %s", url, e.response.status_code)
            return False
        except httpx.InvalidURL as e:
            logger.error("Invalid image URL %r: %s", url, e)
            return False
        except (httpx.RequestError, httpx.StreamError, OSError) as e:
            logger.error("Error downloading image %s: %s", url, e)
            # Don't leave a truncated file behind.
            destination.unlink(missing_ok=True)
            return False

        logger.debug("Saved %s", destination.name)
        return True
