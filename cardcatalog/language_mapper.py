"""
CardCatalog language mapping

Second pass over the all-languages feed, pointing every foreign printing
at the English record for the same set & collector number.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional

from .card_builder import convert_name
from .utils import normalize_name

if TYPE_CHECKING:
    from .catalog_store import CatalogStore

LOGGER = logging.getLogger(__name__)


def _find_same_printing(
    catalog: "CatalogStore", scryfall_object: Dict[str, Any], card_ids: Iterable[str]
) -> Optional[str]:
    for card_id in card_ids:
        other_card = catalog.card_dict[card_id]
        if (
            other_card.set_code == scryfall_object.get("set")
            and other_card.collector_number == scryfall_object.get("collector_number")
        ):
            return card_id
    return None


def add_language_link(
    catalog: "CatalogStore", scryfall_object: Dict[str, Any]
) -> Optional[str]:
    """
    Record the English id for a non-English printing. Siblings sharing the
    oracle id are checked first, then siblings sharing the English name.
    :param catalog: Fully populated catalog
    :param scryfall_object: Scryfall printing in any language
    :return: English id, if one was linked
    """
    if scryfall_object.get("lang") == "en":
        return None

    english_id = _find_same_printing(
        catalog,
        scryfall_object,
        catalog.oracle_to_id.get(scryfall_object.get("oracle_id") or "", []),
    )
    if english_id is None:
        name = normalize_name(convert_name(scryfall_object))
        english_id = _find_same_printing(
            catalog, scryfall_object, catalog.name_to_id.get(name, [])
        )

    if english_id is None:
        LOGGER.debug(
            f"No English printing for {scryfall_object.get('id')} "
            f"({scryfall_object.get('lang')})"
        )
        return None

    catalog.english[scryfall_object["id"]] = english_id
    return english_id
