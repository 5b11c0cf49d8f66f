"""
CardCatalog simple utilities
"""

import bisect
import json
import logging
import os
import time
import unicodedata
from typing import Any, Dict, List, Optional

from . import constants

LOGGER = logging.getLogger(__name__)

TREE_END_MARKER = "$"


def init_logger() -> None:
    """
    Initialize the main system logger
    """
    constants.LOG_PATH.mkdir(parents=True, exist_ok=True)

    start_time = time.strftime("%Y-%m-%d_%H.%M.%S")

    logging.basicConfig(
        level=(
            logging.DEBUG
            if os.environ.get("CARDCATALOG_DEBUG", "").lower() in ["true", "1"]
            else logging.INFO
        ),
        format="[%(levelname)s] %(asctime)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(
                str(constants.LOG_PATH.joinpath(f"cardcatalog_{start_time}.log"))
            ),
        ],
    )


def to_camel_case(snake_str: str) -> str:
    """
    Convert "snake_case" => "camelCase"
    :param snake_str: Snake String
    :return: Camel String
    """
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def normalize_name(name: str) -> str:
    """
    Fold a card name into its lookup form: accents stripped,
    whitespace trimmed, lowercased
    :param name: Card name
    :return: Normalized name
    """
    decomposed = unicodedata.normalize("NFD", name)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.strip().lower()


def binary_insert(value: str, sorted_values: List[str]) -> None:
    """
    Insert a value into an already sorted list, skipping duplicates
    :param value: Value to insert
    :param sorted_values: Sorted list, modified in place
    """
    index = bisect.bisect_left(sorted_values, value)
    if index < len(sorted_values) and sorted_values[index] == value:
        return
    sorted_values.insert(index, value)


def turn_to_tree(words: List[str]) -> Dict[str, Any]:
    """
    Build a character prefix tree for autocomplete lookups.
    Each word ends with a "$" key in the node of its last character.
    :param words: Words to place in the tree
    :return: Nested dictionary tree
    """
    tree: Dict[str, Any] = {}
    for word in words:
        if not word:
            continue
        node = tree
        for character in word:
            node = node.setdefault(character, {})
        node[TREE_END_MARKER] = {}
    return tree


def parse_price(value: Any) -> Optional[float]:
    """
    Convert a Scryfall price string into a float
    :param value: Raw price value
    :return: Price or None if unset
    """
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        LOGGER.debug(f"Unable to parse price {value!r}")
        return None


def load_resource_json(file_name: str) -> Any:
    """
    Load a JSON file that ships in the resources directory
    :param file_name: Resource file name
    :return: Parsed contents
    """
    with constants.RESOURCE_PATH.joinpath(file_name).open(encoding="utf-8") as file:
        return json.load(file)
