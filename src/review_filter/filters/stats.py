"""
Filter Statistics Module

Aggregate statistics over a sequence of reviews: count, average rating,
rating distribution, date range and helpful-vote total.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Any

from review_filter.filters.review import Review
from review_filter.filters.transform import parse_review_date

RATING_SCALE = (1, 2, 3, 4, 5)


@dataclass
class DateRange:
    """Earliest and latest review dates (YYYY-MM-DD), None when unknown."""
    earliest: Optional[str] = None
    latest: Optional[str] = None


@dataclass
class FilterStats:
    """
    Statistics for a set of reviews.

    Attributes:
        total: Number of reviews
        average_rating: Mean of ratings within 1-5, one decimal; 0.0 if none
        rating_distribution: Count per rating, always keyed 1-5
        date_range: Earliest and latest parseable dates
        helpful_votes_total: Sum of helpful votes
    """
    total: int = 0
    average_rating: float = 0.0
    rating_distribution: Dict[int, int] = field(
        default_factory=lambda: {rating: 0 for rating in RATING_SCALE}
    )
    date_range: DateRange = field(default_factory=DateRange)
    helpful_votes_total: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total': self.total,
            'average_rating': self.average_rating,
            'rating_distribution': dict(self.rating_distribution),
            'date_range': {
                'earliest': self.date_range.earliest,
                'latest': self.date_range.latest,
            },
            'helpful_votes_total': self.helpful_votes_total,
        }


def get_filter_stats(reviews: Sequence[Review]) -> FilterStats:
    """
    Compute statistics for reviews.

    Ratings outside 1-5 count towards ``total`` but not towards the
    average or the distribution.

    Args:
        reviews: Reviews to summarise (may be empty)

    Returns:
        FilterStats
    """
    stats = FilterStats(total=len(reviews))

    rating_sum = 0
    rated_count = 0
    earliest = latest = None

    for review in reviews:
        if review.rating in stats.rating_distribution:
            stats.rating_distribution[review.rating] += 1
            rating_sum += review.rating
            rated_count += 1

        review_date = parse_review_date(review.date)
        if review_date is not None:
            if earliest is None or review_date < earliest:
                earliest = review_date
            if latest is None or review_date > latest:
                latest = review_date

        stats.helpful_votes_total += review.helpful_votes

    if rated_count > 0:
        stats.average_rating = round(rating_sum / rated_count, 1)

    if earliest is not None:
        stats.date_range = DateRange(
            earliest=earliest.strftime('%Y-%m-%d'),
            latest=latest.strftime('%Y-%m-%d')
        )

    return stats
