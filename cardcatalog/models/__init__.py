"""Validated input models."""

from .popularity import CardHistory, CardRating, HistorySnapshot

__all__ = [
    "CardHistory",
    "CardRating",
    "HistorySnapshot",
]
