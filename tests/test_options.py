"""
Unit tests for filter options, enums and request parsing.
"""

import pytest

from review_filter.filters import (
    DatePeriod,
    FilterOptions,
    Review,
    SortKey,
    get_filter_options,
    parse_request_filters
)


def test_enum_coercion():
    assert DatePeriod.coerce('Month') == DatePeriod.MONTH
    assert DatePeriod.coerce(DatePeriod.WEEK) == DatePeriod.WEEK
    assert DatePeriod.coerce('fortnight') is None
    assert DatePeriod.coerce(None) is None
    assert SortKey.coerce(' rating-high ') == SortKey.RATING_HIGH
    assert SortKey.coerce('alphabetical') is None


def test_sort_key_field_mapping():
    assert (SortKey.DATE_NEW.field, SortKey.DATE_NEW.descending) == ('date', True)
    assert (SortKey.RATING_LOW.field, SortKey.RATING_LOW.descending) == ('rating', False)
    assert (SortKey.HELPFUL.field, SortKey.HELPFUL.descending) == ('helpful_votes', True)


def test_filter_options_from_dict():
    options = FilterOptions.from_dict({
        'min_rating': 4,
        'date_range': DatePeriod.YEAR,
        'sort_by': SortKey.HELPFUL,
    })

    assert options == FilterOptions(min_rating=4, date_period='year', sort_by='helpful')
    assert options.to_dict() == {'min_rating': 4, 'date_period': 'year', 'sort_by': 'helpful'}


def test_filter_options_empty():
    assert FilterOptions().is_empty
    assert FilterOptions.from_dict({}).is_empty
    assert not FilterOptions(sort_by='helpful').is_empty


def test_filter_options_ignore_non_numeric_rating():
    assert FilterOptions.from_dict({'min_rating': 'lots'}).min_rating is None


def test_get_filter_options_catalogue():
    options = get_filter_options()

    assert set(options) == {'rating_filters', 'date_filters', 'sort_options'}
    assert options['rating_filters']['4'] == '4+ stars'
    assert set(options['date_filters']) == {'', 'week', 'month', 'year', 'custom'}
    assert set(options['sort_options']) == {k.value for k in SortKey}


def test_get_filter_options_returns_copies():
    get_filter_options()['sort_options']['helpful'] = 'changed'
    assert get_filter_options()['sort_options']['helpful'] == 'Most helpful'


def test_parse_request_filters():
    options = parse_request_filters({'rating': '4', 'date': 'month', 'sort': ' helpful '})
    assert options == FilterOptions(min_rating=4, date_period='month', sort_by='helpful')


def test_parse_request_filters_ignores_blank_values():
    assert parse_request_filters({'rating': '', 'date': '  ', 'sort': None}).is_empty


def test_parse_request_filters_custom_dates_only_for_custom_period():
    request = {'date': 'week', 'date_start': '2023-01-01', 'date_end': '2023-02-01'}
    options = parse_request_filters(request)
    assert options.custom_start_date is None
    assert options.custom_end_date is None

    request['date'] = 'custom'
    options = parse_request_filters(request)
    assert options.custom_start_date == '2023-01-01'
    assert options.custom_end_date == '2023-02-01'


def test_parse_request_filters_non_numeric_rating():
    assert parse_request_filters({'rating': 'five'}).min_rating is None


@pytest.mark.parametrize("rating", [0, '0', ' 0 ', 0.0])
def test_parse_request_filters_zero_rating_means_all_ratings(rating):
    options = parse_request_filters({'rating': rating, 'sort': 'helpful'})

    assert options.min_rating is None
    assert options == FilterOptions(sort_by='helpful')


def test_review_from_dict_defaults():
    review = Review.from_dict({'id': 7, 'rating': '4'})

    assert review == Review(id='7', author_name='', rating=4, content='', date='', helpful_votes=0)
    assert Review.from_dict({'id': 'x', 'rating': None}).rating == 0


def test_review_round_trips_through_dict(sample_reviews):
    record = sample_reviews[0].to_dict()
    assert record['author_name'] == 'John Doe'
    assert Review.from_dict(record) == sample_reviews[0]
