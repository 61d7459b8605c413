# product_crawler/models/__init__.py

# This file makes the model classes directly available from the 'models' package.
# Instead of: from product_crawler.models.product_models import ProductRecord
# We can now use: from product_crawler.models import ProductRecord

from .product_models import (
    CrawlStats,
    ExtractionError,
    FieldResult,
    ProductRecord,
    ProductSummary,
    RecordCollection,
)
