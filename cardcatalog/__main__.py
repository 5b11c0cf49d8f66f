"""
CardCatalog Main Executor
"""

import argparse
import logging
import sys
import traceback

from cardcatalog import constants
from cardcatalog.errors import CardCatalogError
from cardcatalog.utils import init_logger

LOGGER: logging.Logger = logging.getLogger(__name__)


def dispatcher(args: argparse.Namespace) -> None:
    """
    CardCatalog Dispatcher
    """
    from cardcatalog.catalog_builder import build_catalog
    from cardcatalog.catalog_config import CatalogConfig
    from cardcatalog.output_generator import write_catalog
    from cardcatalog.providers import (
        ScryfallBulkFileProvider,
        load_histories,
        load_ratings,
    )

    config = CatalogConfig()

    default_cards_path = args.default_cards or config.get_path(
        "Sources", "default_cards_path"
    )
    all_cards_path = args.all_cards or config.get_path("Sources", "all_cards_path")
    if default_cards_path is None or all_cards_path is None:
        raise CardCatalogError("Both a default cards and an all cards file are required")

    # Sources are read in full before anything is written
    ratings = load_ratings(args.ratings or config.get_path("Sources", "ratings_path"))
    histories = load_histories(
        args.histories or config.get_path("Sources", "histories_path")
    )

    catalog = build_catalog(
        ScryfallBulkFileProvider(default_cards_path),
        ScryfallBulkFileProvider(all_cards_path),
        ratings,
        histories,
    )

    write_catalog(
        catalog,
        args.output or config.output_path,
        pretty_print=args.pretty or config.get_boolean("Output", "pretty"),
        max_workers=args.max_workers or config.get_int("Output", "max_workers", 4),
    )


def main() -> None:
    """
    CardCatalog safe main call
    """
    from cardcatalog.arg_parser import parse_args
    from cardcatalog.catalog_config import CatalogConfig

    args = parse_args()
    init_logger()

    CatalogConfig(args.config)
    LOGGER.info(
        f"Starting {CatalogConfig().catalog_version} on {constants.CATALOG_BUILD_DATE}"
    )

    try:
        dispatcher(args)
    except CardCatalogError as error:
        LOGGER.fatal(f"Exception caught: {error} {traceback.format_exc()}")
        LOGGER.fatal("Catalog was not updated")
        sys.exit(1)

    LOGGER.info("Finished catalog update...")


if __name__ == "__main__":
    main()
