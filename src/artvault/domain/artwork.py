"""Domain models for artwork and ratings."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum

MIN_RATING = 1
MAX_RATING = 5


class ArtworkSort(StrEnum):
    """Supported gallery orderings."""

    NEWEST = "newest"
    TOP_RATED = "top_rated"


@dataclass(frozen=True)
class RatingEntry:
    """A single rating left by an anonymous rating session."""

    session_id: str
    rating: int


@dataclass(frozen=True)
class Artwork:
    """Represents an artwork stored in the database."""

    id: str
    title: str
    description: str
    image_url: str
    creator_id: str
    ratings: tuple[RatingEntry, ...]
    average_rating: float
    total_ratings: int
    created_at: datetime
    updated_at: datetime

    def has_rating_from(self, session_id: str) -> bool:
        """Return True when the session already rated this artwork."""
        return any(entry.session_id == session_id for entry in self.ratings)


def average_rating(values: Iterable[int]) -> float:
    """Mean of rating values rounded half-up to one decimal, 0 when empty."""
    values = list(values)
    if not values:
        return 0.0
    mean = Decimal(sum(values)) / Decimal(len(values))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def is_valid_rating(value: object) -> bool:
    """Return True for integer ratings within the accepted range."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_RATING <= value <= MAX_RATING
