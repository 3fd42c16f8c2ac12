import math
from typing import Iterable

import attrs


def round_half_up(value: float, digits: int = 1) -> float:
    """Round like Math.round(x * 10) / 10, not banker's rounding."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


@attrs.frozen
class RatingSummary:
    average_rating: float = 0.0
    review_count: int = 0

    @classmethod
    def from_ratings(cls, ratings: Iterable[int]) -> 'RatingSummary':
        values = list(ratings)
        if not values:
            return cls()
        return cls(
            average_rating=round_half_up(sum(values) / len(values)),
            review_count=len(values),
        )

    @classmethod
    def from_aggregate(cls, *, average: float | None, count: int | None) -> 'RatingSummary':
        if not count or average is None:
            return cls()
        return cls(average_rating=round_half_up(float(average)), review_count=int(count))
