# product_crawler/pipeline/extractors.py
import logging
from typing import List, Optional

from lxml import html

from .. import config
from ..models import ExtractionError, FieldResult, ProductRecord, ProductSummary

logger = logging.getLogger(__name__)


def _has_class(name: str) -> str:
    """XPath predicate matching elements whose class list contains `name`."""
    return f"contains(concat(' ', normalize-space(@class), ' '), ' {name} ')"


PRODUCT_BOX_XPATH = f"//*[{_has_class('produkt_box')}]"
TITLE_LINK_XPATH = f".//*[{_has_class('produkt_box_tytul')}]//a"
PRICE_XPATH = f".//*[{_has_class('produkty_box_stopka1')}]//span[{_has_class('cena')}]"
STOCK_XPATH = '//div[@style="text-align: center;"]'
DESCRIPTION_XPATH = f"//*[{_has_class('produkt_box_tresc')}]"
IMAGE_LINK_XPATH = f"//*[{_has_class('pokaz-produkt-zdj')}]//a"


def _first(node: html.HtmlElement, xpath: str) -> Optional[html.HtmlElement]:
    matches = node.xpath(xpath)
    return matches[0] if matches else None


def normalize_url(href: str, base_url: str) -> str:
    """
    Site links are appended to the shop root. A leading '/' is dropped first
    so the root's own trailing slash isn't doubled.
    """
    if href.startswith("/"):
        return f"{base_url}{href[1:]}"
    return f"{base_url}{href}"


def _extract_summary(box: html.HtmlElement, base_url: str) -> ProductSummary:
    title_element = _first(box, TITLE_LINK_XPATH)
    if title_element is None:
        raise ExtractionError("product box has no title link")
    href = title_element.get("href")
    if href is None:
        raise ExtractionError("title link has no href")

    price_element = _first(box, PRICE_XPATH)
    if price_element is None:
        raise ExtractionError("product box has no price")

    return ProductSummary(
        title=title_element.text_content().strip(),
        price=price_element.text_content().strip(),
        detail_link=normalize_url(href, base_url),
    )


def extract_product_summaries(page: html.HtmlElement, base_url: str) -> List[ProductSummary]:
    """Parses every product box on a search page. Broken boxes are logged and skipped."""
    boxes = page.xpath(PRODUCT_BOX_XPATH)
    summaries = []
    for box in boxes:
        try:
            summaries.append(_extract_summary(box, base_url))
        except ExtractionError as e:
            logger.warning("Error fetching product data: %s", e)
    logger.debug("Found %d product boxes, kept %d.", len(boxes), len(summaries))
    return summaries


def get_catalog_number(page: html.HtmlElement, marker: str = config.CATALOG_NUMBER_MARKER) -> FieldResult:
    # The number itself is bolded somewhere inside the element holding the label.
    text_nodes = page.xpath("//text()[contains(., $marker)]", marker=marker)
    if not text_nodes:
        return FieldResult.fallback(config.NO_NUMBER)

    text_node = text_nodes[0]
    parent = text_node.getparent()
    # lxml hands tail text to the preceding sibling, not to the enclosing element.
    if text_node.is_tail:
        parent = parent.getparent()
    if parent is None:
        return FieldResult.fallback(config.NO_NUMBER)

    strong = _first(parent, ".//strong")
    if strong is None:
        return FieldResult.fallback(config.NO_NUMBER)
    return FieldResult.hit(strong.text_content().strip())


def _after_last_colon(text: str) -> Optional[str]:
    # Trailing empty segments don't count: "Stan: dostępny:" -> "dostępny".
    parts = text.split(":")
    while parts and parts[-1] == "":
        parts.pop()
    if not parts:
        return None
    return parts[-1].strip()


def get_stock_status(page: html.HtmlElement) -> FieldResult:
    stock_element = _first(page, STOCK_XPATH)
    if stock_element is None:
        return FieldResult.fallback(config.NO_INFORMATION)
    status = _after_last_colon(stock_element.text_content())
    if status is None:
        return FieldResult.fallback(config.NO_INFORMATION)
    return FieldResult.hit(status)


def get_description(page: html.HtmlElement) -> FieldResult:
    description_element = _first(page, DESCRIPTION_XPATH)
    if description_element is None:
        return FieldResult.fallback(config.NO_DESCRIPTION)
    return FieldResult.hit(description_element.text_content().strip())


def get_specifications(page: html.HtmlElement) -> FieldResult:
    specs = " ".join(p.text_content() for p in page.xpath("//p")).strip()
    if not specs:
        return FieldResult.fallback(config.NO_SPECIFICATIONS)
    return FieldResult.hit(specs)


def find_image_links(page: html.HtmlElement, base_url: str) -> List[str]:
    """Absolute URLs of every gallery image on a detail page, in page order."""
    links = []
    for anchor in page.xpath(IMAGE_LINK_XPATH):
        href = anchor.get("href")
        if href is None:
            logger.warning("Skipping gallery link without href: %s", html.tostring(anchor, encoding="unicode")[:100])
            continue
        links.append(normalize_url(href, base_url))
    return links


def extract_product_record(
    page: html.HtmlElement,
    summary: ProductSummary,
    marker: str = config.CATALOG_NUMBER_MARKER,
) -> ProductRecord:
    """Builds the export row for one product from its detail page and search-page summary."""
    catalog_number = get_catalog_number(page, marker)
    stock_status = get_stock_status(page)
    description = get_description(page)
    specifications = get_specifications(page)

    missing = [
        name
        for name, result in (
            ("catalog number", catalog_number),
            ("stock status", stock_status),
            ("description", description),
            ("specifications", specifications),
        )
        if not result.found
    ]
    if missing:
        logger.debug("Using placeholders for %s on %s", ", ".join(missing), summary.detail_link)

    return ProductRecord(
        title=summary.title,
        catalog_number=catalog_number.value,
        specifications=specifications.value,
        price=summary.price,
        stock_status=stock_status.value,
        description=description.value,
        url=summary.detail_link,
    )
