# run_crawler.py
import argparse
import logging

# Import RichHandler here for centralized logging
from rich.logging import RichHandler

from product_crawler import config
from product_crawler.main import main as run_crawler


def configure_logging(debug: bool = False) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(levelname)-8s - %(name)-35s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = logging.FileHandler(config.LOG_FILE, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG) # Log all debug messages to file
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    rich_handler = RichHandler(
        level=logging.DEBUG if debug else logging.INFO,
        show_time=True,
        show_level=True,
        show_path=False,
    )
    root_logger.addHandler(rich_handler)

    # httpx logs every request at INFO; we already log each fetch ourselves.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def cli() -> None:
    parser = argparse.ArgumentParser(
        description="Crawl the tkaninydzieciece.com.pl search listing into products.csv and an images folder.",
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help="Show debug messages on the console (the log file always gets them).",
    )
    args = parser.parse_args()

    configure_logging(debug=args.debug)

    logging.info("=" * 60)
    logging.info("Product Crawler Starting...")
    logging.info("=" * 60)

    try:
        run_crawler()
    except KeyboardInterrupt:
        logging.warning("Crawler interrupted by user. Nothing was saved.")
    except Exception as e:
        logging.critical("An unexpected error occurred: %s", e, exc_info=True)
    finally:
        logging.info("=" * 60)
        logging.info("Crawler execution finished.")


if __name__ == "__main__":
    cli()
