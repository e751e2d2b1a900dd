"""
API Module

FastAPI-based REST API for the review filter.
Applies filters and statistics to reviews supplied in the request body.
"""

import logging
from dataclasses import replace
from typing import Dict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from review_filter import __version__
from review_filter.data.validation import validate_filters
from review_filter.filters import (
    apply_filters,
    get_filter_options,
    get_filter_stats,
    parse_request_filters
)
from review_filter.serving.schemas import (
    FilterParams,
    FilterRequest,
    FilterResponse,
    FilterOptionsResponse,
    StatsRequest,
    StatsResponse,
    ValidationResponse,
    ReviewSchema,
    HealthResponse
)
from review_filter.utils.config import get_config, get_api_config
from review_filter.utils.logging import setup_logging

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Review Filter API",
    description="Rating, date and sort filtering with aggregate statistics for review lists",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", response_model=Dict[str, str])
async def root():
    """Root endpoint."""
    return {"message": "Review Filter API", "status": "running"}


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/v1/filters/options", response_model=FilterOptionsResponse)
async def filter_options():
    """List selectable filter values and their labels."""
    return FilterOptionsResponse(**get_filter_options())


@app.post("/v1/filters/validate", response_model=ValidationResponse)
async def validate(request: FilterParams):
    """Validate filter parameters without applying them."""
    options = parse_request_filters(request.params())
    report = validate_filters(options)
    return ValidationResponse(**report.to_dict())


@app.post("/v1/reviews/filter", response_model=FilterResponse)
async def filter_reviews(request: FilterRequest):
    """
    Filter and sort the supplied reviews.

    Steps run as rating -> date -> sort. When no sort is requested the
    configured ``filters.default_sort`` applies.
    """
    options = parse_request_filters(request.params())

    default_sort = get_config().get('filters.default_sort')
    if options.sort_by is None and default_sort:
        options = replace(options, sort_by=default_sort)

    report = validate_filters(options)
    if not report.passed:
        logger.info(f"Rejected filters {options.to_dict()}: {report.errors}")
        raise HTTPException(status_code=422, detail={"errors": report.errors})

    try:
        reviews = [r.to_review() for r in request.reviews]
        filtered = apply_filters(reviews, options)
        stats = get_filter_stats(filtered)

        return FilterResponse(
            reviews=[ReviewSchema.from_review(r) for r in filtered],
            count=len(filtered),
            filters_applied=options.to_dict(),
            stats=StatsResponse(**stats.to_dict())
        )

    except Exception as e:
        logger.error(f"Review filtering failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/v1/reviews/stats", response_model=StatsResponse)
async def review_stats(request: StatsRequest):
    """Compute statistics for the supplied reviews."""
    try:
        stats = get_filter_stats([r.to_review() for r in request.reviews])
        return StatsResponse(**stats.to_dict())

    except Exception as e:
        logger.error(f"Statistics failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


def create_app() -> FastAPI:
    """Factory function to create FastAPI application."""
    return app


if __name__ == "__main__":
    import uvicorn

    setup_logging()
    api_config = get_api_config()
    uvicorn.run(app, host=api_config.get('host', '0.0.0.0'), port=int(api_config.get('port', 8000)))
