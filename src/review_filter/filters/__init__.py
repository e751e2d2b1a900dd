"""
Review Filter Module

Pure filter, sort and statistics operations over review records.

Main Functions:
    filter_by_rating: Keep reviews at or above a rating
    filter_by_date: Keep reviews within a date period
    sort_reviews: Stable sort by a named criteria
    apply_filters: Rating -> date -> sort pipeline
    get_filter_stats: Aggregate statistics

Quick Start:
    from review_filter.filters import Review, apply_filters, get_filter_stats

    reviews = [Review.from_dict(r) for r in records]
    visible = apply_filters(reviews, {'min_rating': 4, 'sort_by': 'rating-high'})
    stats = get_filter_stats(visible)
"""

from review_filter.filters.review import Review

from review_filter.filters.options import (
    DatePeriod,
    SortKey,
    FilterOptions,
    get_filter_options,
    parse_request_filters
)

from review_filter.filters.transform import (
    filter_by_rating,
    filter_by_date,
    sort_reviews,
    apply_filters,
    parse_review_date
)

from review_filter.filters.stats import (
    FilterStats,
    DateRange,
    get_filter_stats
)

__all__ = [
    # Model
    'Review',

    # Options
    'DatePeriod',
    'SortKey',
    'FilterOptions',
    'get_filter_options',
    'parse_request_filters',

    # Transform
    'filter_by_rating',
    'filter_by_date',
    'sort_reviews',
    'apply_filters',
    'parse_review_date',

    # Statistics
    'FilterStats',
    'DateRange',
    'get_filter_stats',
]
