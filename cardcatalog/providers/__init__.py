"""
Data sources feeding the catalog build
"""

from .popularity_files import load_histories, load_ratings
from .scryfall_bulk import ScryfallBulkFileProvider

__all__ = [
    "ScryfallBulkFileProvider",
    "load_histories",
    "load_ratings",
]
