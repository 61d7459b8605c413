# product_crawler/utils/filenames.py
import re

# ASCII only: accented letters in product titles are dropped, not transliterated.
_UNSAFE_CHARS = re.compile(r"[^\w\s-]+", re.ASCII)
_WHITESPACE_RUN = re.compile(r"\s+", re.ASCII)


def sanitize_filename(name: str) -> str:
    """
    Turns a product title into something safe to use as a file name stem.
    Everything except ASCII letters, digits, '_', '-' and whitespace is removed,
    then every whitespace run becomes a single underscore.
    """
    cleaned = _UNSAFE_CHARS.sub("", name)
    return _WHITESPACE_RUN.sub("_", cleaned)
