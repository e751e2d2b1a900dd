"""
Filter Options Module

Enumerated filter values, the filter configuration record and helpers
for turning request parameters into filter options.
"""

import logging
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class DatePeriod(Enum):
    """Date windows counted back from the current moment."""
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    CUSTOM = "custom"  # Explicit start/end dates

    @classmethod
    def coerce(cls, value: Union['DatePeriod', str, None]) -> Optional['DatePeriod']:
        """Return the matching period, or None for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class SortKey(Enum):
    """Sort criteria, each mapped to a (field, direction) pair."""
    DATE_NEW = "date-new"
    DATE_OLD = "date-old"
    RATING_HIGH = "rating-high"
    RATING_LOW = "rating-low"
    HELPFUL = "helpful"

    @classmethod
    def coerce(cls, value: Union['SortKey', str, None]) -> Optional['SortKey']:
        """Return the matching sort key, or None for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None

    @property
    def field(self) -> str:
        return _SORT_FIELDS[self][0]

    @property
    def descending(self) -> bool:
        return _SORT_FIELDS[self][1]


_SORT_FIELDS: Dict[SortKey, Tuple[str, bool]] = {
    SortKey.DATE_NEW: ('date', True),
    SortKey.DATE_OLD: ('date', False),
    SortKey.RATING_HIGH: ('rating', True),
    SortKey.RATING_LOW: ('rating', False),
    SortKey.HELPFUL: ('helpful_votes', True),
}


@dataclass(frozen=True)
class FilterOptions:
    """
    Filter configuration applied by ``apply_filters``.

    Every field is optional; an unset field skips its step.

    Attributes:
        min_rating: Keep reviews rated at least this value
        date_period: Keep reviews dated within this period
        custom_start_date: Start date (YYYY-MM-DD) for the custom period
        custom_end_date: End date (YYYY-MM-DD) for the custom period
        sort_by: Sort criteria, applied after all filters
    """
    min_rating: Optional[int] = None
    date_period: Optional[str] = None
    custom_start_date: Optional[str] = None
    custom_end_date: Optional[str] = None
    sort_by: Optional[str] = None

    @classmethod
    def from_dict(cls, filters: Mapping[str, Any]) -> 'FilterOptions':
        """Build options from a mapping. ``date_range`` is accepted as an alias."""
        date_period = filters.get('date_period', filters.get('date_range'))
        return cls(
            min_rating=_optional_int(filters.get('min_rating')),
            date_period=_enum_value(date_period),
            custom_start_date=filters.get('custom_start_date'),
            custom_end_date=filters.get('custom_end_date'),
            sort_by=_enum_value(filters.get('sort_by'))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the options that are set."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    @property
    def is_empty(self) -> bool:
        return not self.to_dict()


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == '':
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Ignoring non-numeric rating filter: {value!r}")
        return None


# =============================================================================
# Option catalogue
# =============================================================================

RATING_FILTER_LABELS = {
    '': 'All ratings',
    '5': '5 stars',
    '4': '4+ stars',
    '3': '3+ stars',
    '2': '2+ stars',
    '1': '1+ stars',
}

DATE_FILTER_LABELS = {
    '': 'All time',
    DatePeriod.WEEK.value: 'Last week',
    DatePeriod.MONTH.value: 'Last month',
    DatePeriod.YEAR.value: 'Last year',
    DatePeriod.CUSTOM.value: 'Custom range',
}

SORT_OPTION_LABELS = {
    SortKey.DATE_NEW.value: 'Newest first',
    SortKey.DATE_OLD.value: 'Oldest first',
    SortKey.RATING_HIGH.value: 'Highest rating',
    SortKey.RATING_LOW.value: 'Lowest rating',
    SortKey.HELPFUL.value: 'Most helpful',
}


def get_filter_options() -> Dict[str, Dict[str, str]]:
    """
    Get the selectable filter values and their display labels.

    Returns:
        Dictionary with ``rating_filters``, ``date_filters`` and
        ``sort_options`` mappings of value -> label
    """
    return {
        'rating_filters': dict(RATING_FILTER_LABELS),
        'date_filters': dict(DATE_FILTER_LABELS),
        'sort_options': dict(SORT_OPTION_LABELS),
    }


def parse_request_filters(request: Mapping[str, Any]) -> FilterOptions:
    """
    Parse request-style parameters into filter options.

    Recognised parameters are ``rating``, ``date``, ``date_start``,
    ``date_end`` and ``sort``. Blank values are ignored; custom dates are
    only read when ``date`` is ``custom``.

    Args:
        request: Request parameters (query string or form values)

    Returns:
        FilterOptions with the parsed values
    """
    # 0 is the "All ratings" choice
    min_rating = _optional_int(_clean(request.get('rating'))) or None

    date_period = _clean(request.get('date')) or None
    custom_start = custom_end = None
    if date_period == DatePeriod.CUSTOM.value:
        custom_start = _clean(request.get('date_start')) or None
        custom_end = _clean(request.get('date_end')) or None

    return FilterOptions(
        min_rating=min_rating,
        date_period=date_period,
        custom_start_date=custom_start,
        custom_end_date=custom_end,
        sort_by=_clean(request.get('sort')) or None
    )


def _clean(value: Any) -> str:
    if value is None:
        return ''
    return str(value).strip()
