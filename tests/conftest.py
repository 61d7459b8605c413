import pytest

from product_crawler import config
from product_crawler.delegates import FileManagerDelegate

from .fakes import FakeSite


@pytest.fixture
def file_manager(tmp_path) -> FileManagerDelegate:
    return FileManagerDelegate(
        base_path=tmp_path / "data",
        csv_filename=config.CSV_FILENAME,
        csv_headers=config.CSV_HEADERS,
        images_dirname=config.IMAGES_DIRNAME,
        image_extension=config.IMAGE_EXTENSION,
    )


@pytest.fixture
def fake_site():
    """Builds FakeSite instances and closes every client they handed out."""
    sites = []

    def build(routes) -> FakeSite:
        site = FakeSite(routes)
        sites.append(site)
        return site

    yield build
    for site in sites:
        site.close()
