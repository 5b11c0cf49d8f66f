"""
CardCatalog Arg Parser to determine what actions to take
"""

import argparse
import pathlib


def parse_args() -> argparse.Namespace:
    """
    Parse command line arguments to determine which feeds to read
    and where the catalog gets written
    :return: Namespace of requests
    """
    parser = argparse.ArgumentParser("cardcatalog")

    parser.add_argument(
        "--config",
        type=pathlib.Path,
        metavar="FILE",
        help="Configuration file to use instead of the packaged properties file.",
    )
    parser.add_argument(
        "--default-cards",
        type=pathlib.Path,
        metavar="FILE",
        help="Scryfall default_cards bulk file (English printings).",
    )
    parser.add_argument(
        "--all-cards",
        type=pathlib.Path,
        metavar="FILE",
        help="Scryfall all_cards bulk file (every language).",
    )
    parser.add_argument(
        "--ratings",
        type=pathlib.Path,
        metavar="FILE",
        help="JSON list of Elo ratings & embeddings.",
    )
    parser.add_argument(
        "--histories",
        type=pathlib.Path,
        metavar="FILE",
        help="JSON list of cube inclusion histories.",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=pathlib.Path,
        metavar="DIR",
        help="Directory the catalog files are written to.",
    )
    parser.add_argument(
        "--pretty",
        "-p",
        action="store_true",
        help="When dumping JSON files, prettify the contents instead of minifying them.",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        metavar="N",
        help="How many catalog files to write at once.",
    )

    return parser.parse_args()
