# product_crawler/delegates/file_manager_delegate.py
import csv
import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from ..models import ProductRecord
from ..utils.filenames import sanitize_filename

logger = logging.getLogger(__name__)


class FileManagerDelegate:
    """Handles all file system interactions for the crawler."""
    def __init__(
        self,
        base_path: Path,
        csv_filename: str,
        csv_headers: Sequence[str],
        images_dirname: str = "images",
        image_extension: str = ".jpg",
    ):
        self.base_path = base_path
        self.csv_path = base_path / csv_filename
        self.csv_headers = list(csv_headers)
        self.images_path = base_path / images_dirname
        self.image_extension = image_extension

        for p in [self.base_path, self.images_path]:
            p.mkdir(parents=True, exist_ok=True)
        logger.info("File manager initialized. Data will be stored in: %s", base_path)

    def image_path(self, title: str, index: int) -> Path:
        """Path for the `index`-th (1-based) image of the product called `title`."""
        return self.images_path / f"{sanitize_filename(title)}_{index}{self.image_extension}"

    def save_products_csv(self, records: Iterable[ProductRecord]) -> Path:
        """Writes every record, in order, under the fixed header. Replaces any previous export."""
        count = 0
        try:
            with self.csv_path.open("w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f)
                writer.writerow(self.csv_headers)
                for record in records:
                    writer.writerow(record.as_row())
                    count += 1
        except OSError as e:
            logger.error("Failed to save products to %s: %s", self.csv_path, e, exc_info=True)
            raise
        logger.info("Data saved to %s (%d rows)", self.csv_path, count)
        return self.csv_path

    def load_products_csv(self) -> List[ProductRecord]:
        """Reads a previous export back into ProductRecord objects."""
        with self.csv_path.open("r", encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            header = next(reader, None)
            if header != self.csv_headers:
                logger.warning("Unexpected header in %s: %s", self.csv_path, header)
            records = []
            for row in reader:
                if len(row) != len(self.csv_headers):
                    logger.error(
                        "Malformed row %d in %s: expected %d columns, got %d: %s",
                        reader.line_num, self.csv_path, len(self.csv_headers), len(row), row,
                    )
                    raise ValueError(
                        f"{self.csv_path}: row {reader.line_num} has {len(row)} columns, "
                        f"expected {len(self.csv_headers)}"
                    )
                records.append(ProductRecord(*row))
        logger.debug("Loaded %d records from %s", len(records), self.csv_path.name)
        return records
