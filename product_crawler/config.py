# product_crawler/config.py

# Import the 'Path' object for handling file paths in a way that works on any OS (Windows, macOS, Linux)
from pathlib import Path

# --- Core Settings ---
# The shop root. Relative links found on the pages are appended to this.
BASE_URL = "https://tkaninydzieciece.com.pl/"
# The search listing. The page number is appended after a comma: ".../szukaj,1", ".../szukaj,2", ...
BASE_SEARCH_URL = "https://tkaninydzieciece.com.pl/szukaj"

# --- File Path Settings ---
# All output lands under ./data relative to where the crawler is started.
DATA_PATH = Path("data")
IMAGES_DIRNAME = "images"
CSV_FILENAME = "products.csv"
# Images are always saved with this extension, whatever the server sends back.
IMAGE_EXTENSION = ".jpg"
LOG_FILE = Path("crawler.log")

# Column names of the export, in ProductRecord field order.
CSV_HEADERS = [
    "Title",
    "Catalog Number",
    "Specifications",
    "Price",
    "Stock Status",
    "Description",
    "Link",
]

# --- Extraction Settings ---
# The shop is Polish; the catalog number sits next to this label (case-sensitive).
CATALOG_NUMBER_MARKER = "nr katalogowy"

# Values written when a field cannot be located on the detail page.
NO_NUMBER = "No number"
NO_INFORMATION = "No information"
NO_DESCRIPTION = "No description"
NO_SPECIFICATIONS = "No specifications"
