"""
Unit tests for loading reviews from files and DataFrames.
"""

import json

import pandas as pd
import pytest

from review_filter.data.ingestion import (
    SAMPLE_REVIEWS,
    load_reviews,
    reviews_from_frame,
    reviews_to_frame
)
from review_filter.filters import Review


def test_sample_reviews_match_fixture(sample_reviews):
    assert list(SAMPLE_REVIEWS) == sample_reviews


def test_reviews_from_frame_fills_defaults():
    df = pd.DataFrame({
        'id': ['a', 'b'],
        'rating': [5, 'bad'],
        'date': ['2023-12-01T08:30:00', None],
    })

    reviews = reviews_from_frame(df)

    assert reviews == [
        Review('a', '', 5, '', '2023-12-01', 0),
        Review('b', '', 0, '', '', 0),
    ]
    assert isinstance(reviews[0].rating, int)


def test_reviews_from_frame_parses_mixed_date_forms():
    df = pd.DataFrame({
        'id': ['a', 'b', 'c'],
        'date': ['2023-12-01', '2023-11-15T08:30:00', 'not a date'],
    })

    assert [r.date for r in reviews_from_frame(df)] == ['2023-12-01', '2023-11-15', '']


def test_reviews_from_frame_parses_mixed_offsets():
    df = pd.DataFrame({
        'id': ['a', 'b'],
        'date': ['2023-12-01T10:00:00+01:00', '2023-11-15T08:30:00-05:00'],
    })

    assert [r.date for r in reviews_from_frame(df)] == ['2023-12-01', '2023-11-15']


def test_load_reviews_csv_with_mixed_dates(tmp_path):
    path = tmp_path / "reviews.csv"
    path.write_text(
        "id,rating,date\n"
        "1,5,2023-12-01\n"
        "2,3,2023-11-15T08:30:00-05:00\n"
        "3,4,2023-10-20T10:00:00+01:00\n"
    )

    assert [r.date for r in load_reviews(path)] == ['2023-12-01', '2023-11-15', '2023-10-20']


def test_reviews_to_frame(sample_reviews):
    df = reviews_to_frame(sample_reviews)

    assert list(df.columns) == ['id', 'author_name', 'rating', 'content', 'date', 'helpful_votes']
    assert len(df) == 5
    assert df['helpful_votes'].sum() == 40


def test_load_reviews_csv(tmp_path, sample_reviews):
    path = tmp_path / "reviews.csv"
    reviews_to_frame(sample_reviews).to_csv(path, index=False)

    assert load_reviews(path) == sample_reviews
    assert load_reviews(path, nrows=2) == sample_reviews[:2]


def test_load_reviews_json(tmp_path, sample_reviews):
    path = tmp_path / "reviews.json"
    path.write_text(json.dumps([r.to_dict() for r in sample_reviews]))

    assert load_reviews(path) == sample_reviews


def test_load_reviews_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_reviews(tmp_path / "missing.csv")


def test_load_reviews_unsupported_type(tmp_path):
    path = tmp_path / "reviews.txt"
    path.write_text("id,rating\n1,5\n")

    with pytest.raises(ValueError, match="Unsupported"):
        load_reviews(path)
