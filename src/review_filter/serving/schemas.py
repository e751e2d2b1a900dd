"""
API Schemas Module

Pydantic models for request/response validation in the FastAPI endpoints.
"""

from typing import Optional, Dict, List, Any, Union
from pydantic import BaseModel, Field

from review_filter.filters.review import Review


# =============================================================================
# Shared Schemas
# =============================================================================

class ReviewSchema(BaseModel):
    """Review record as sent and returned by the API."""
    id: str = Field(..., description="Review identifier, unique within a batch")
    author_name: str = Field(default="", description="Reviewer display name")
    rating: int = Field(default=0, description="Star rating, expected 1-5")
    content: str = Field(default="", description="Review text")
    date: str = Field(default="", description="Review date (YYYY-MM-DD)")
    helpful_votes: int = Field(default=0, ge=0, description="Helpful vote count")

    def to_review(self) -> Review:
        return Review(
            id=self.id,
            author_name=self.author_name,
            rating=self.rating,
            content=self.content,
            date=self.date,
            helpful_votes=self.helpful_votes
        )

    @classmethod
    def from_review(cls, review: Review) -> 'ReviewSchema':
        return cls(**review.to_dict())


# =============================================================================
# Request Schemas
# =============================================================================

class FilterParams(BaseModel):
    """Request-style filter parameters."""
    rating: Optional[Union[int, str]] = Field(default=None, description="Minimum rating (1-5)")
    date: Optional[str] = Field(default=None, description="Date range: week, month, year or custom")
    date_start: Optional[str] = Field(default=None, description="Custom start date (YYYY-MM-DD)")
    date_end: Optional[str] = Field(default=None, description="Custom end date (YYYY-MM-DD)")
    sort: Optional[str] = Field(default=None, description="Sort criteria")

    def params(self) -> Dict[str, Any]:
        return {
            'rating': self.rating,
            'date': self.date,
            'date_start': self.date_start,
            'date_end': self.date_end,
            'sort': self.sort,
        }

    class Config:
        json_schema_extra = {
            "example": {
                "rating": 4,
                "date": "month",
                "sort": "rating-high"
            }
        }


class FilterRequest(FilterParams):
    """Reviews to filter plus the filter parameters."""
    reviews: List[ReviewSchema] = Field(default_factory=list, description="Reviews to filter")

    class Config:
        json_schema_extra = {
            "example": {
                "reviews": [
                    {
                        "id": "1",
                        "author_name": "John Doe",
                        "rating": 5,
                        "content": "Excellent service!",
                        "date": "2023-12-01",
                        "helpful_votes": 10
                    }
                ],
                "rating": 4,
                "sort": "rating-high"
            }
        }


class StatsRequest(BaseModel):
    """Reviews to summarise."""
    reviews: List[ReviewSchema] = Field(default_factory=list)


# =============================================================================
# Response Schemas
# =============================================================================

class DateRangeResponse(BaseModel):
    earliest: Optional[str] = None
    latest: Optional[str] = None


class StatsResponse(BaseModel):
    """Aggregate review statistics."""
    total: int
    average_rating: float
    rating_distribution: Dict[int, int]
    date_range: DateRangeResponse
    helpful_votes_total: int


class FilterResponse(BaseModel):
    """Filtered reviews with their statistics."""
    reviews: List[ReviewSchema]
    count: int
    filters_applied: Dict[str, Any]
    stats: StatsResponse


class ValidationResponse(BaseModel):
    """Filter validation outcome."""
    valid: bool
    errors: List[str]
    warnings: List[str] = Field(default_factory=list)


class FilterOptionsResponse(BaseModel):
    """Selectable filter values and labels."""
    rating_filters: Dict[str, str]
    date_filters: Dict[str, str]
    sort_options: Dict[str, str]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str

