"""
Review Ingestion Module

Loads review records from local CSV/JSON files and converts between
pandas DataFrames and Review values.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import pandas as pd

from review_filter.filters.review import Review

logger = logging.getLogger(__name__)

REVIEW_COLUMNS = ['id', 'author_name', 'rating', 'content', 'date', 'helpful_votes']

SUPPORTED_SUFFIXES = ('.csv', '.json')

# Demonstration reviews used by the CLI
SAMPLE_REVIEWS: Tuple[Review, ...] = (
    Review('1', 'John Doe', 5, 'Excellent service!', '2023-12-01', 10),
    Review('2', 'Jane Smith', 3, 'Good but could be better', '2023-11-15', 5),
    Review('3', 'Bob Johnson', 4, 'Very good experience', '2023-10-20', 8),
    Review('4', 'Alice Brown', 2, 'Not satisfied', '2023-09-10', 2),
    Review('5', 'Charlie Wilson', 5, 'Amazing!', '2023-08-05', 15),
)


def load_reviews(path: Union[str, Path], nrows: int = None) -> List[Review]:
    """
    Load reviews from a CSV or JSON file.

    JSON files must hold a list of review records.

    Args:
        path: Path to a .csv or .json file
        nrows: Number of rows to keep (None for all)

    Returns:
        List of Review

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file type is not supported
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Review file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported review file type '{suffix}'. Use one of {SUPPORTED_SUFFIXES}")

    if suffix == '.csv':
        df = pd.read_csv(path, dtype={'id': str}, nrows=nrows)
    else:
        df = pd.read_json(path, dtype={'id': str}, convert_dates=False, keep_default_dates=False)
        if nrows is not None:
            df = df.head(nrows)

    logger.info(f"Loaded {len(df):,} reviews from {path}")
    return reviews_from_frame(df)


def reviews_from_frame(df: pd.DataFrame) -> List[Review]:
    """
    Convert a DataFrame to reviews.

    Missing columns are filled with defaults; ratings and helpful votes
    that are not numeric become 0; ISO 8601 dates are normalised to YYYY-MM-DD
    (unparseable dates become empty strings).

    Args:
        df: DataFrame with review columns

    Returns:
        List of Review in row order
    """
    df = df.copy()

    for col in REVIEW_COLUMNS:
        if col not in df.columns:
            df[col] = None

    for col in ('rating', 'helpful_votes'):
        df[col] = pd.to_numeric(df[col], errors='coerce').fillna(0).astype(int)

    # Offsets are folded into UTC so mixed date, datetime and offset rows parse together
    dates = pd.to_datetime(df['date'], format='ISO8601', utc=True, errors='coerce').dt.tz_convert(None)
    df['date'] = dates.dt.strftime('%Y-%m-%d').fillna('')

    for col in ('id', 'author_name', 'content'):
        df[col] = df[col].fillna('').astype(str)

    return [
        Review(
            id=row.id,
            author_name=row.author_name,
            rating=int(row.rating),
            content=row.content,
            date=row.date,
            helpful_votes=int(row.helpful_votes)
        )
        for row in df[REVIEW_COLUMNS].itertuples(index=False)
    ]


def reviews_to_frame(reviews: Sequence[Review]) -> pd.DataFrame:
    """Convert reviews to a DataFrame with one row per review."""
    return pd.DataFrame([r.to_dict() for r in reviews], columns=REVIEW_COLUMNS)
