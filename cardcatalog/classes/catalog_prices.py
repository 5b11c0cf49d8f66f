"""
CardCatalog Singular Card.Prices Object
"""

from typing import Any, Dict, Optional

from .. import constants
from ..utils import parse_price
from .json_object import JsonObject


class CatalogPricesObject(JsonObject):
    """
    CardCatalog Singular Card.Prices Object
    """

    usd: Optional[float]
    usd_foil: Optional[float]
    usd_etched: Optional[float]
    eur: Optional[float]
    tix: Optional[float]

    def __init__(self, scryfall_prices: Optional[Dict[str, Any]] = None) -> None:
        scryfall_prices = scryfall_prices or {}
        for key in constants.PRICE_KEYS:
            setattr(self, key, parse_price(scryfall_prices.get(key)))

    def to_json(self) -> Dict[str, Any]:
        # Currency codes are published as-is, not camel cased
        return {key: getattr(self, key) for key in constants.PRICE_KEYS}
