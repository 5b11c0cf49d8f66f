"""Popularity input models: Elo ratings and cube inclusion histories."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CardRating(BaseModel):
    """Externally computed Elo rating and similarity embedding for a card name."""

    model_config = ConfigDict(extra="ignore")

    name: str
    elo: float
    embedding: Optional[List[float]] = None


class HistorySnapshot(BaseModel):
    """Cube inclusion numbers at a point in time."""

    model_config = ConfigDict(extra="ignore")

    total: List[Optional[float]] = Field(default_factory=list)
    picks: Optional[int] = 0

    @property
    def cube_count(self) -> int:
        """Number of cubes the card appears in."""
        return int(self.total[0] or 0) if self.total else 0

    @property
    def popularity_fraction(self) -> float:
        """Share of cubes the card appears in, 0 to 1."""
        return float(self.total[1] or 0) if len(self.total) > 1 else 0.0


class CardHistory(BaseModel):
    """Popularity history keyed by oracle id."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    oracle_id: str = Field(alias="oracleId")
    current: HistorySnapshot = Field(default_factory=HistorySnapshot)
