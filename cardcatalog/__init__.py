"""
CardCatalog, a card catalog builder for Scryfall bulk data
MIT License
"""

from ._version import __version__
from .catalog_builder import build_catalog, save_english_card
from .catalog_store import CatalogStore, reasonable_card
from .errors import CardCatalogError, CatalogWriteError, SourceUnavailableError
from .token_inference import TokenInferenceEngine, extract_token_descriptor

__all__ = [
    "CardCatalogError",
    "CatalogStore",
    "CatalogWriteError",
    "SourceUnavailableError",
    "TokenInferenceEngine",
    "__version__",
    "build_catalog",
    "extract_token_descriptor",
    "reasonable_card",
    "save_english_card",
]
