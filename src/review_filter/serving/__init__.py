"""
Serving Module

REST API layer for filtering supplied reviews.
"""

from review_filter.serving.api import app, create_app
from review_filter.serving.schemas import (
    ReviewSchema,
    FilterParams,
    FilterRequest,
    FilterResponse,
    StatsRequest,
    StatsResponse,
    ValidationResponse,
    FilterOptionsResponse,
    HealthResponse
)

__all__ = [
    'app',
    'create_app',
    'ReviewSchema',
    'FilterParams',
    'FilterRequest',
    'FilterResponse',
    'StatsRequest',
    'StatsResponse',
    'ValidationResponse',
    'FilterOptionsResponse',
    'HealthResponse',
]
