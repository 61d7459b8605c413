import csv

from product_crawler import config
from product_crawler import main as main_module
from product_crawler.delegates import DownloaderDelegate, PageFetcherDelegate

from .fakes import detail_page, product_box, search_page


def test_main_crawls_and_writes_export(tmp_path, monkeypatch, fake_site) -> None:
    # Routes are matched on path only, so the real shop host in config is fine here.
    site = fake_site({
        "/szukaj,1": search_page(product_box("Tkanina Misie", "/tkanina-misie"), product_box("Minky", "minky")),
        "/szukaj,2": search_page(),
        "/tkanina-misie": detail_page(images=("/img/1.jpg",)),
        "/minky": 500,
        "/img/1.jpg": b"jpeg",
    })
    monkeypatch.setattr(main_module, "PageFetcherDelegate", lambda: PageFetcherDelegate(client=site.client()))
    monkeypatch.setattr(main_module, "DownloaderDelegate", lambda: DownloaderDelegate(client=site.client()))

    csv_path = main_module.main(data_path=tmp_path)

    assert csv_path == tmp_path / config.CSV_FILENAME
    with csv_path.open(encoding="utf-8", newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == config.CSV_HEADERS
    assert len(rows) == 2
    assert rows[1][0] == "Tkanina Misie"
    assert rows[1][6] == config.BASE_URL + "tkanina-misie"
    assert (tmp_path / config.IMAGES_DIRNAME / "Tkanina_Misie_1.jpg").read_bytes() == b"jpeg"
