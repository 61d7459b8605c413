# product_crawler/models/product_models.py

from dataclasses import dataclass, fields
from typing import Iterator, List


class ExtractionError(Exception):
    """Raised when an expected node is missing from a product box."""


@dataclass(frozen=True)
class ProductSummary:
    """One product box from a search page. Only lives until its detail page is fetched."""
    title: str
    price: str
    detail_link: str


@dataclass(frozen=True)
class ProductRecord:
    """
    This class is the blueprint for our final output. It represents one row
    of the CSV export. Field order is the column order.
    """
    title: str
    catalog_number: str
    specifications: str
    price: str
    stock_status: str
    description: str
    url: str

    def as_row(self) -> List[str]:
        return [getattr(self, f.name) for f in fields(self)]


@dataclass(frozen=True)
class FieldResult:
    """
    Outcome of a single detail-page field lookup. When the markup is missing,
    `value` holds the placeholder and `found` is False.
    """
    value: str
    found: bool

    @classmethod
    def hit(cls, value: str) -> "FieldResult":
        return cls(value=value, found=True)

    @classmethod
    def fallback(cls, placeholder: str) -> "FieldResult":
        return cls(value=placeholder, found=False)


class RecordCollection:
    """Append-only, crawl-ordered sequence of ProductRecord."""

    def __init__(self):
        self._records: List[ProductRecord] = []

    def append(self, record: ProductRecord) -> None:
        if not isinstance(record, ProductRecord):
            raise TypeError(f"Expected ProductRecord, got {type(record).__name__}")
        self._records.append(record)

    def __iter__(self) -> Iterator[ProductRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> ProductRecord:
        return self._records[index]


@dataclass
class CrawlStats:
    """Counters reported at the end of a run."""
    pages_fetched: int = 0
    products_seen: int = 0
    records_collected: int = 0
    products_dropped: int = 0
    images_downloaded: int = 0
    images_failed: int = 0
