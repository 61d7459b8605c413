# product_crawler/utils/__init__.py

from .filenames import sanitize_filename
