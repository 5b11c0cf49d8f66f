"""Pytest configuration and fixtures for cardcatalog tests."""

import copy
from typing import Any, Dict, List, Optional

import pytest

from cardcatalog.catalog_store import CatalogStore
from cardcatalog.classes import CatalogCardObject
from cardcatalog.token_inference import TokenInferenceEngine

ALL_LEGAL = {
    "standard": "legal",
    "future": "legal",
    "historic": "legal",
    "pioneer": "legal",
    "modern": "legal",
    "legacy": "legal",
    "pauper": "not_legal",
    "vintage": "restricted",
    "penny": "banned",
    "commander": "legal",
    "brawl": "legal",
}


def make_printing(**overrides: Any) -> Dict[str, Any]:
    """Build a single-faced Scryfall printing, overriding any field."""
    printing: Dict[str, Any] = {
        "object": "card",
        "id": "0000aaaa-0000-0000-0000-000000000001",
        "oracle_id": "1111aaaa-0000-0000-0000-000000000001",
        "name": "Grizzly Bears",
        "lang": "en",
        "released_at": "2020-01-01",
        "scryfall_uri": "https://scryfall.com/card/tst/1/grizzly-bears",
        "layout": "normal",
        "image_uris": {
            "small": "https://img/small/bears.jpg",
            "normal": "https://img/normal/bears.jpg",
            "art_crop": "https://img/art_crop/bears.jpg",
        },
        "mana_cost": "{1}{G}",
        "cmc": 2.0,
        "type_line": "Creature — Bear",
        "oracle_text": "",
        "power": "2",
        "toughness": "2",
        "colors": ["G"],
        "color_identity": ["G"],
        "legalities": copy.deepcopy(ALL_LEGAL),
        "reprint": False,
        "digital": False,
        "promo": False,
        "textless": False,
        "full_art": False,
        "frame": "2015",
        "frame_effects": [],
        "finishes": ["nonfoil", "foil"],
        "border_color": "black",
        "set": "tst",
        "set_name": "Test Set",
        "collector_number": "1",
        "rarity": "common",
        "artist": "Jeff A. Menges",
        "tcgplayer_id": 1234,
        "mtgo_id": 5678,
        "prices": {
            "usd": "0.25",
            "usd_foil": "1.50",
            "usd_etched": None,
            "eur": "0.10",
            "tix": None,
        },
    }
    printing.update(overrides)
    return printing


def make_transform_printing(**overrides: Any) -> Dict[str, Any]:
    """Build a two-faced transform printing."""
    printing = make_printing(
        id="0000bbbb-0000-0000-0000-000000000002",
        oracle_id="1111bbbb-0000-0000-0000-000000000002",
        name="Delver of Secrets // Insectile Aberration",
        layout="transform",
        mana_cost="",
        cmc=1.0,
        type_line="Creature — Human Wizard // Creature — Human Insect",
        colors=None,
        color_identity=["U"],
        collector_number="51",
        card_faces=[
            {
                "object": "card_face",
                "name": "Delver of Secrets",
                "mana_cost": "{U}",
                "type_line": "Creature — Human Wizard",
                "oracle_text": "At the beginning of your upkeep, look at the top card of your library.",
                "colors": ["U"],
                "power": "1",
                "toughness": "1",
                "image_uris": {
                    "small": "https://img/small/delver.jpg",
                    "normal": "https://img/normal/delver.jpg",
                    "art_crop": "https://img/art_crop/delver.jpg",
                },
            },
            {
                "object": "card_face",
                "name": "Insectile Aberration",
                "mana_cost": "",
                "type_line": "Creature — Human Insect",
                "oracle_text": "Flying",
                "colors": ["U"],
                "color_indicator": ["U"],
                "power": "3",
                "toughness": "2",
                "image_uris": {
                    "small": "https://img/small/aberration.jpg",
                    "normal": "https://img/normal/aberration.jpg",
                    "art_crop": "https://img/art_crop/aberration.jpg",
                },
            },
        ],
    )
    printing.pop("image_uris")
    printing.pop("oracle_text")
    printing.pop("power")
    printing.pop("toughness")
    printing.update(overrides)
    return printing


def make_token_printing(
    card_id: str,
    name: str,
    type_line: str,
    power: Optional[str] = None,
    toughness: Optional[str] = None,
    colors: Optional[List[str]] = None,
    oracle_text: str = "",
    **overrides: Any,
) -> Dict[str, Any]:
    """Build a token printing as found in the default_cards feed."""
    printing = make_printing(
        id=card_id,
        oracle_id=f"oracle-{card_id}",
        name=name,
        layout="token",
        mana_cost="",
        cmc=0.0,
        type_line=type_line,
        oracle_text=oracle_text,
        colors=colors or [],
        color_identity=colors or [],
        set="ttst",
        collector_number="1",
        tcgplayer_id=None,
    )
    printing["power"] = power
    printing["toughness"] = toughness
    if power is None:
        printing.pop("power")
        printing.pop("toughness")
    printing.update(overrides)
    return printing


@pytest.fixture
def catalog() -> CatalogStore:
    """An empty catalog store."""
    return CatalogStore()


@pytest.fixture
def token_engine(catalog: CatalogStore) -> TokenInferenceEngine:
    """Token engine with the packaged curated tables."""
    return TokenInferenceEngine(catalog)


@pytest.fixture
def add_card(catalog: CatalogStore):
    """Normalize a printing and add its records, without token inference."""
    from cardcatalog.card_builder import build_catalog_cards

    def _add(printing: Dict[str, Any]) -> List[CatalogCardObject]:
        cards = build_catalog_cards(printing, catalog.popularity)
        for card in cards:
            catalog.add(card, is_secondary=card.id != printing["id"])
        return cards

    return _add


@pytest.fixture
def printing_factory():
    """Factory for single-faced Scryfall printings."""
    return make_printing


@pytest.fixture
def transform_factory():
    """Factory for transform Scryfall printings."""
    return make_transform_printing


@pytest.fixture
def token_factory():
    """Factory for token Scryfall printings."""
    return make_token_printing
