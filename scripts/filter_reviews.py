#!/usr/bin/env python
"""
Review Filtering Demo

Runs the rating, date, sort, combined-filter and statistics steps
against the sample reviews (or a CSV/JSON file) and prints the results.

Usage:
    python scripts/filter_reviews.py
    python scripts/filter_reviews.py --input reviews.csv --min-rating 3 --sort helpful
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src/ to path for running from a checkout
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from review_filter.data.ingestion import SAMPLE_REVIEWS, load_reviews
from review_filter.data.validation import validate_filters
from review_filter.filters import (
    FilterOptions,
    apply_filters,
    filter_by_date,
    filter_by_rating,
    get_filter_stats,
    sort_reviews
)
from review_filter.utils.config import get_config
from review_filter.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def print_section(title: str):
    print()
    print(title)
    print("-" * len(title))


def run_demo(reviews, min_rating: int, period: str, sort_by: str):
    """Print the output of each filter step."""
    print_section(f"Test 1: Filter by Rating ({min_rating}+ stars)")
    filtered = filter_by_rating(reviews, min_rating)
    print(f"Original reviews: {len(reviews)}")
    print(f"Filtered reviews ({min_rating}+ stars): {len(filtered)}")
    for review in filtered:
        print(f"- {review.author_name}: {review.rating} stars")

    print_section(f"Test 2: Filter by Date (last {period})")
    filtered = filter_by_date(reviews, period)
    print(f"Filtered reviews (last {period}): {len(filtered)}")
    for review in filtered:
        print(f"- {review.author_name}: {review.date}")

    print_section(f"Test 3: Sort Reviews ({sort_by})")
    for review in sort_reviews(reviews, sort_by):
        print(f"- {review.author_name}: {review.rating} stars, {review.date}, {review.helpful_votes} helpful")

    print_section("Test 4: Apply Multiple Filters")
    options = FilterOptions(min_rating=min_rating, sort_by=sort_by)
    print(f"Filters: {options.to_dict()}")
    for review in apply_filters(reviews, options):
        print(f"- {review.author_name}: {review.rating} stars")

    print_section("Test 5: Filter Statistics")
    stats = get_filter_stats(reviews)
    print(f"Total reviews: {stats.total}")
    print(f"Average rating: {stats.average_rating}")
    print("Rating distribution:")
    for rating, count in stats.rating_distribution.items():
        print(f"- {rating} stars: {count} reviews")
    print(f"Date range: {stats.date_range.earliest} to {stats.date_range.latest}")
    print(f"Total helpful votes: {stats.helpful_votes_total}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Review filtering demo")
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="CSV or JSON file of reviews (defaults to built-in samples)"
    )
    parser.add_argument("--min-rating", type=int, default=4, help="Minimum rating")
    parser.add_argument(
        "--period",
        type=str,
        default="month",
        help="Date period: week, month, year"
    )
    parser.add_argument("--sort", type=str, default="rating-high", help="Sort criteria")
    parser.add_argument("--config", type=str, default=None, help="Path to config YAML")

    args = parser.parse_args()

    config = get_config(args.config)
    setup_logging(config=config)

    report = validate_filters({'min_rating': args.min_rating, 'date_period': args.period, 'sort_by': args.sort})
    if not report.passed:
        for error in report.errors:
            logger.error(error)
        sys.exit(2)

    try:
        reviews = load_reviews(args.input) if args.input else list(SAMPLE_REVIEWS)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load reviews: {e}")
        sys.exit(1)

    print("=" * 60)
    print("Review Filtering Demo")
    print("=" * 60)

    run_demo(reviews, args.min_rating, args.period, args.sort)

    print()
    print("=" * 60)
    print("Demo complete")
    print("=" * 60)


if __name__ == "__main__":
    main()
