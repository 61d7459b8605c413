# product_crawler/pipeline/__init__.py

# This file makes the crawler and the parsing functions directly available from the 'pipeline' package.
from .crawler import ProductCrawler
from .extractors import (
    extract_product_record,
    extract_product_summaries,
    find_image_links,
    get_catalog_number,
    get_description,
    get_specifications,
    get_stock_status,
    normalize_url,
)
