"""
CardCatalog Builder

Runs the two passes that produce a catalog: English printings are
normalized, token linked and stored, then the all-languages feed is
mapped back onto them.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from .card_builder import build_catalog_cards
from .catalog_store import CatalogStore, PresentableFilter
from .classes import CatalogCardObject
from .models import CardHistory, CardRating
from .token_inference import TokenInferenceEngine

LOGGER = logging.getLogger(__name__)


def save_english_card(
    catalog: CatalogStore,
    token_engine: TokenInferenceEngine,
    scryfall_object: Dict[str, Any],
) -> List[CatalogCardObject]:
    """
    Normalize one printing, link its tokens and store the records
    :param catalog: Catalog being built
    :param token_engine: Token resolver bound to the same catalog
    :param scryfall_object: Scryfall printing
    :return: Records added
    """
    cards = build_catalog_cards(scryfall_object, catalog.popularity)
    for card in cards:
        card.tokens = token_engine.infer_tokens(scryfall_object, card)
        catalog.add(card, is_secondary=card.id != scryfall_object["id"])
    return cards


def build_catalog(
    default_cards: Iterable[Dict[str, Any]],
    all_cards: Iterable[Dict[str, Any]],
    ratings: Optional[Iterable[CardRating]] = None,
    histories: Optional[Iterable[CardHistory]] = None,
    presentable: Optional[PresentableFilter] = None,
    token_engine_factory: Callable[
        [CatalogStore], TokenInferenceEngine
    ] = TokenInferenceEngine,
) -> CatalogStore:
    """
    Build a catalog from scratch
    :param default_cards: English printings, in feed order
    :param all_cards: Printings in every language, in feed order
    :param ratings: Elo ratings & embeddings
    :param histories: Cube inclusion histories
    :param presentable: Filter for records allowed to supply display images
    :param token_engine_factory: Builds the token resolver for the catalog
    :return: Completed catalog
    """
    catalog = CatalogStore(presentable)

    LOGGER.info("Fetching Elo...")
    catalog.load_ratings(ratings or [])
    catalog.load_histories(histories or [])

    LOGGER.info("Processing cards...")
    token_engine = token_engine_factory(catalog)
    printings = 0
    for scryfall_object in default_cards:
        save_english_card(catalog, token_engine, scryfall_object)
        printings += 1
    LOGGER.info(f"Processed {printings:,} printings into {len(catalog):,} cards")

    # Language links need the first pass to be fully drained
    LOGGER.info("Creating language mappings...")
    for scryfall_object in all_cards:
        catalog.add_language_link(scryfall_object)
    LOGGER.info(f"Linked {len(catalog.english):,} non-English printings")

    return catalog
