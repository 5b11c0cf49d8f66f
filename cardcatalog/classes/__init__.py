"""
CardCatalog Data Classes
"""

from .catalog_card import CatalogCardObject
from .catalog_images import CatalogCardImagesObject, CatalogImageObject
from .catalog_prices import CatalogPricesObject
from .json_object import JsonObject

__all__ = [
    "CatalogCardImagesObject",
    "CatalogCardObject",
    "CatalogImageObject",
    "CatalogPricesObject",
    "JsonObject",
]
