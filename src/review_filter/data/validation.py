"""
Filter Validation Module

Validation rules for filter parameters before they are applied.

Key Validations:
    - Rating range (min_rating must be 1-5)
    - Known date period (week, month, year, custom)
    - Custom date format (YYYY-MM-DD) and ordering (start <= end)
    - Known sort criteria
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from review_filter.filters.options import DatePeriod, FilterOptions, SortKey

logger = logging.getLogger(__name__)

DATE_FORMAT = '%Y-%m-%d'


class ValidationLevel(Enum):
    """Severity level for validation checks."""
    BLOCKING = "blocking"  # Filters must not be applied
    WARNING = "warning"    # Log alert, continue
    INFO = "info"          # Informational only


@dataclass
class ValidationResult:
    """
    Container for a single validation check result.

    Attributes:
        check_name: Name of the validation check
        passed: Whether the check passed
        level: Severity level
        message: Human-readable result message
        details: Additional details (e.g., offending value)
    """
    check_name: str
    passed: bool
    level: ValidationLevel
    message: str
    details: Optional[Dict] = None

    def __str__(self):
        status = "PASS" if self.passed else "FAIL"
        return f"[{self.level.value.upper()}] {status}: {self.check_name} - {self.message}"


@dataclass
class ValidationReport:
    """
    Aggregated validation report for a filter configuration.

    Attributes:
        results: List of individual validation results
    """
    results: List[ValidationResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """Check if all blocking validations passed."""
        return all(
            r.passed for r in self.results
            if r.level == ValidationLevel.BLOCKING
        )

    @property
    def blocking_failures(self) -> List[ValidationResult]:
        """Get list of failed blocking validations."""
        return [r for r in self.results if not r.passed and r.level == ValidationLevel.BLOCKING]

    @property
    def warnings(self) -> List[ValidationResult]:
        """Get list of warning-level issues."""
        return [r for r in self.results if not r.passed and r.level == ValidationLevel.WARNING]

    @property
    def errors(self) -> List[str]:
        """Messages of failed blocking validations."""
        return [r.message for r in self.blocking_failures]

    def add(self, result: ValidationResult):
        """Add a validation result to the report."""
        self.results.append(result)
        log_level = logging.WARNING if not result.passed else logging.DEBUG
        logger.log(log_level, str(result))

    def summary(self) -> str:
        """Generate a summary string."""
        total = len(self.results)
        passed = sum(1 for r in self.results if r.passed)
        status = "PASSED" if self.passed else "FAILED"

        return (
            f"Filter Validation: {status}\n"
            f"  Total Checks: {total}\n"
            f"  Passed: {passed}\n"
            f"  Blocking Failures: {len(self.blocking_failures)}\n"
            f"  Warnings: {len(self.warnings)}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'valid': self.passed,
            'errors': self.errors,
            'warnings': [r.message for r in self.warnings],
        }


class FilterValidator:
    """
    Validation orchestrator for filter parameters.

    Example:
        validator = FilterValidator()
        report = validator.validate({'min_rating': 4, 'sort_by': 'helpful'})
        if not report.passed:
            print(report.errors)
    """

    def __init__(self, strict: bool = False):
        """
        Initialize validator.

        Args:
            strict: If True, raise on blocking failures during validate()
        """
        self.strict = strict

    def validate(self, filters: Union[FilterOptions, Mapping[str, Any]]) -> ValidationReport:
        """
        Run all validation checks on a filter configuration.

        Args:
            filters: FilterOptions or a mapping of raw filter values

        Returns:
            ValidationReport with all results

        Raises:
            ValueError: If strict=True and blocking validations fail
        """
        raw = _raw_filters(filters)
        report = ValidationReport()

        report.add(self._check_min_rating(raw))
        report.add(self._check_date_period(raw))
        if DatePeriod.coerce(raw.get('date_period')) == DatePeriod.CUSTOM:
            report.add(self._check_custom_dates(raw))
        report.add(self._check_sort_by(raw))

        logger.debug(report.summary())

        if self.strict and not report.passed:
            failures = [str(f) for f in report.blocking_failures]
            raise ValueError("Invalid filters:\n" + "\n".join(failures))

        return report

    def _check_min_rating(self, raw: Dict[str, Any]) -> ValidationResult:
        """Check min_rating is numeric and within 1-5."""
        if raw.get('min_rating') is None:
            return ValidationResult(
                check_name="min_rating",
                passed=True,
                level=ValidationLevel.INFO,
                message="No rating filter"
            )

        value = raw['min_rating']
        try:
            rating = float(value)
            valid = 1 <= rating <= 5
        except (TypeError, ValueError):
            valid = False

        return ValidationResult(
            check_name="min_rating",
            passed=valid,
            level=ValidationLevel.BLOCKING,
            message="Rating filter is valid" if valid
            else "Invalid minimum rating value. Must be between 1 and 5.",
            details=None if valid else {'value': value}
        )

    def _check_date_period(self, raw: Dict[str, Any]) -> ValidationResult:
        """Check the date period is a known value."""
        if not raw.get('date_period'):
            return ValidationResult(
                check_name="date_period",
                passed=True,
                level=ValidationLevel.INFO,
                message="No date filter"
            )

        value = raw['date_period']
        valid = DatePeriod.coerce(value) is not None

        return ValidationResult(
            check_name="date_period",
            passed=valid,
            level=ValidationLevel.BLOCKING,
            message="Date range is valid" if valid else "Invalid date range value.",
            details=None if valid else {'value': value, 'allowed': [p.value for p in DatePeriod]}
        )

    def _check_custom_dates(self, raw: Dict[str, Any]) -> ValidationResult:
        """Check custom dates are YYYY-MM-DD and ordered."""
        start = raw.get('custom_start_date')
        end = raw.get('custom_end_date')

        for label, value in (('start', start), ('end', end)):
            if value and not is_valid_date(value):
                return ValidationResult(
                    check_name="custom_dates",
                    passed=False,
                    level=ValidationLevel.BLOCKING,
                    message=f"Invalid custom {label} date format. Use YYYY-MM-DD.",
                    details={label: value}
                )

        if start and end and start > end:
            return ValidationResult(
                check_name="custom_dates",
                passed=False,
                level=ValidationLevel.BLOCKING,
                message="Start date must be before end date.",
                details={'start': start, 'end': end}
            )

        return ValidationResult(
            check_name="custom_dates",
            passed=True,
            level=ValidationLevel.BLOCKING,
            message="Custom dates are valid"
        )

    def _check_sort_by(self, raw: Dict[str, Any]) -> ValidationResult:
        """Check the sort criteria is a known value."""
        if not raw.get('sort_by'):
            return ValidationResult(
                check_name="sort_by",
                passed=True,
                level=ValidationLevel.INFO,
                message="No sort criteria"
            )

        value = raw['sort_by']
        valid = SortKey.coerce(value) is not None

        return ValidationResult(
            check_name="sort_by",
            passed=valid,
            level=ValidationLevel.BLOCKING,
            message="Sort criteria is valid" if valid else "Invalid sort criteria.",
            details=None if valid else {'value': value, 'allowed': [k.value for k in SortKey]}
        )


def _raw_filters(filters: Union[FilterOptions, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(filters, FilterOptions):
        return filters.to_dict()

    raw = dict(filters)
    if 'date_period' not in raw and 'date_range' in raw:
        raw['date_period'] = raw.pop('date_range')
    for key in ('date_period', 'sort_by'):
        if isinstance(raw.get(key), Enum):
            raw[key] = raw[key].value
    return raw


def is_valid_date(value: str) -> bool:
    """Check a date string is a real calendar date in YYYY-MM-DD form."""
    try:
        return datetime.strptime(value, DATE_FORMAT).strftime(DATE_FORMAT) == value
    except (TypeError, ValueError):
        return False


def validate_filters(filters: Union[FilterOptions, Mapping[str, Any]]) -> ValidationReport:
    """
    Validate filter parameters.

    Args:
        filters: FilterOptions or a mapping of raw filter values

    Returns:
        ValidationReport; ``report.passed`` is False on any blocking failure
    """
    return FilterValidator(strict=False).validate(filters)
