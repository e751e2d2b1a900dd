"""
Data Layer Module

Review ingestion from local files and validation of filter parameters.

Main Classes:
    FilterValidator: Validation orchestrator
    ValidationReport: Aggregated validation results

Quick Start:
    from review_filter.data import load_reviews, validate_filters

    reviews = load_reviews('reviews.csv')
    report = validate_filters({'min_rating': 4, 'date_period': 'month'})
"""

from review_filter.data.ingestion import (
    SAMPLE_REVIEWS,
    load_reviews,
    reviews_from_frame,
    reviews_to_frame
)

from review_filter.data.validation import (
    FilterValidator,
    ValidationResult,
    ValidationReport,
    ValidationLevel,
    validate_filters,
    is_valid_date
)

__all__ = [
    # Ingestion
    'SAMPLE_REVIEWS',
    'load_reviews',
    'reviews_from_frame',
    'reviews_to_frame',

    # Validation
    'FilterValidator',
    'ValidationResult',
    'ValidationReport',
    'ValidationLevel',
    'validate_filters',
    'is_valid_date',
]
