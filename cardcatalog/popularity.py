"""
Elo, embedding & history lookups consulted while cards are normalized
"""

import logging
import math
from typing import Dict, Iterable, List

from . import constants
from .models import CardHistory, CardRating, HistorySnapshot
from .utils import normalize_name

LOGGER = logging.getLogger(__name__)


def normalize_embedding(embedding: Iterable[float] | None) -> List[float]:
    """
    Scale an embedding to unit length
    :param embedding: Raw embedding vector
    :return: L2 normalized vector, or the zero vector if the
             input is missing, the wrong length, or all zeros
    """
    values = list(embedding or [])
    if len(values) != constants.EMBEDDING_LENGTH:
        return [0.0] * constants.EMBEDDING_LENGTH

    norm = math.sqrt(sum(value * value for value in values))
    if norm <= 0:
        return [0.0] * constants.EMBEDDING_LENGTH

    return [value / norm for value in values]


class PopularityLookups:
    """
    Rating, embedding and history maps. These are build-time inputs only
    and never part of the persisted catalog.
    """

    elo_by_name: Dict[str, float]
    embedding_by_name: Dict[str, List[float]]
    history_by_oracle_id: Dict[str, HistorySnapshot]

    def __init__(self) -> None:
        self.elo_by_name = {}
        self.embedding_by_name = {}
        self.history_by_oracle_id = {}

    def load_ratings(self, ratings: Iterable[CardRating]) -> None:
        """
        Index Elo & embeddings by normalized card name
        :param ratings: Rating entries
        """
        count = 0
        for rating in ratings:
            name = normalize_name(rating.name)
            self.elo_by_name[name] = rating.elo
            self.embedding_by_name[name] = normalize_embedding(rating.embedding)
            count += 1
        LOGGER.info(f"Loaded {count:,} ratings")

    def load_histories(self, histories: Iterable[CardHistory]) -> None:
        """
        Index current popularity snapshots by oracle id
        :param histories: History entries
        """
        count = 0
        for history in histories:
            self.history_by_oracle_id[history.oracle_id] = history.current
            count += 1
        LOGGER.info(f"Loaded {count:,} histories")

    def get_elo(self, name: str) -> float:
        return self.elo_by_name.get(normalize_name(name)) or constants.DEFAULT_ELO

    def get_embedding(self, name: str) -> List[float]:
        embedding = self.embedding_by_name.get(normalize_name(name))
        if embedding is None:
            return [0.0] * constants.EMBEDDING_LENGTH
        return list(embedding)

    def get_history(self, oracle_id: str | None) -> HistorySnapshot | None:
        if not oracle_id:
            return None
        return self.history_by_oracle_id.get(oracle_id)
