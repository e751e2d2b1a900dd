"""
Review Transform Module

Pure filter and sort operations over a sequence of reviews.

Every function returns a new list and leaves its input untouched.
Unknown periods and sort keys fall back to a no-op instead of raising:
    - filter_by_date: unknown period -> all reviews pass
    - sort_reviews: unknown sort key -> input order kept
"""

import logging
from datetime import datetime
from typing import Any, List, Mapping, Optional, Sequence, Union

import pandas as pd

from review_filter.filters.options import DatePeriod, FilterOptions, SortKey
from review_filter.filters.review import Review

logger = logging.getLogger(__name__)

# Calendar offsets counted back from "now"
PERIOD_OFFSETS = {
    DatePeriod.WEEK: pd.DateOffset(weeks=1),
    DatePeriod.MONTH: pd.DateOffset(months=1),
    DatePeriod.YEAR: pd.DateOffset(years=1),
}

END_OF_DAY = pd.Timedelta(hours=23, minutes=59, seconds=59)


def parse_review_date(value: Optional[str]) -> Optional[pd.Timestamp]:
    """
    Parse a review date string.

    Args:
        value: Date string, e.g. '2023-12-01'

    Returns:
        Timezone-naive timestamp, or None if missing or unparseable
    """
    if not value:
        return None

    ts = pd.to_datetime(value, errors='coerce')
    if pd.isna(ts):
        return None

    return _naive(ts)


def _naive(ts: pd.Timestamp) -> pd.Timestamp:
    """Drop the timezone, converting aware timestamps to UTC first."""
    if ts.tzinfo is not None:
        ts = ts.tz_convert(None)
    return ts


def filter_by_rating(reviews: Sequence[Review], min_rating: int) -> List[Review]:
    """
    Keep reviews rated at least ``min_rating``, preserving order.

    Args:
        reviews: Reviews to filter
        min_rating: Minimum rating (inclusive)

    Returns:
        Filtered list of reviews
    """
    return [r for r in reviews if r.rating >= min_rating]


def filter_by_date(
    reviews: Sequence[Review],
    period: Union[DatePeriod, str],
    now: Optional[datetime] = None,
    custom_start_date: Optional[str] = None,
    custom_end_date: Optional[str] = None
) -> List[Review]:
    """
    Keep reviews dated within a period ending now, preserving order.

    Reviews without a parseable date are dropped whenever a known period
    is applied.

    Args:
        reviews: Reviews to filter
        period: 'week', 'month', 'year' or 'custom'
        now: Reference moment; defaults to the current local time
        custom_start_date: Start date (YYYY-MM-DD) for 'custom'
        custom_end_date: End date (YYYY-MM-DD) for 'custom', inclusive

    Returns:
        Filtered list of reviews
    """
    resolved = DatePeriod.coerce(period)
    if resolved is None:
        logger.warning(f"Unknown date period {period!r}, skipping date filter")
        return list(reviews)

    end = _naive(pd.Timestamp(now)) if now is not None else pd.Timestamp.now()

    if resolved == DatePeriod.CUSTOM:
        start = _custom_bound(custom_start_date)
        custom_end = _custom_bound(custom_end_date)
        if custom_end is not None:
            end = custom_end + END_OF_DAY
    else:
        start = end - PERIOD_OFFSETS[resolved]

    filtered = []
    for review in reviews:
        review_date = parse_review_date(review.date)
        if review_date is None:
            continue
        if start is not None and review_date < start:
            continue
        if review_date > end:
            continue
        filtered.append(review)

    logger.debug(f"Date filter '{resolved.value}' kept {len(filtered)}/{len(reviews)} reviews")
    return filtered


def _custom_bound(value: Optional[str]) -> Optional[pd.Timestamp]:
    if not value:
        return None
    ts = parse_review_date(value)
    if ts is None:
        logger.warning(f"Ignoring unparseable custom date {value!r}")
        return None
    return ts.normalize()


def sort_reviews(reviews: Sequence[Review], sort_key: Union[SortKey, str]) -> List[Review]:
    """
    Sort reviews by a named criteria.

    The sort is stable in both directions: reviews with equal keys keep
    their original relative order. Reviews without a parseable date sort
    as the oldest.

    Args:
        reviews: Reviews to sort
        sort_key: 'date-new', 'date-old', 'rating-high', 'rating-low' or 'helpful'

    Returns:
        Sorted list of reviews
    """
    resolved = SortKey.coerce(sort_key)
    if resolved is None:
        logger.warning(f"Unknown sort key {sort_key!r}, keeping input order")
        return list(reviews)

    if resolved.field == 'date':
        def key(review: Review):
            ts = parse_review_date(review.date)
            return ts if ts is not None else pd.Timestamp.min
    else:
        def key(review: Review):
            return getattr(review, resolved.field)

    return sorted(reviews, key=key, reverse=resolved.descending)


def apply_filters(
    reviews: Sequence[Review],
    filters: Union[FilterOptions, Mapping[str, Any], None] = None,
    now: Optional[datetime] = None
) -> List[Review]:
    """
    Apply a filter configuration to reviews.

    Steps run in a fixed order, each on the previous step's output:
        1. Rating filter (min_rating)
        2. Date filter (date_period)
        3. Sort (sort_by)
    Unset options skip their step.

    Args:
        reviews: Reviews to filter
        filters: FilterOptions or a mapping with the same keys
        now: Reference moment for the date filter

    Returns:
        Filtered and sorted list of reviews
    """
    if filters is None:
        options = FilterOptions()
    elif isinstance(filters, FilterOptions):
        options = filters
    else:
        options = FilterOptions.from_dict(filters)

    result = list(reviews)

    if options.min_rating is not None:
        result = filter_by_rating(result, options.min_rating)

    if options.date_period:
        result = filter_by_date(
            result,
            options.date_period,
            now=now,
            custom_start_date=options.custom_start_date,
            custom_end_date=options.custom_end_date
        )

    if options.sort_by:
        result = sort_reviews(result, options.sort_by)

    logger.debug(f"Applied filters {options.to_dict()}: {len(result)}/{len(reviews)} reviews kept")
    return result
