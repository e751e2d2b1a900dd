"""
Review Model

Immutable review record consumed by the filter functions.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Review:
    """
    Single user-submitted review.

    Attributes:
        id: Identifier, unique within a batch
        author_name: Display name of the reviewer
        rating: Star rating, expected 1-5 (not enforced)
        content: Review text
        date: Calendar date, ISO format (YYYY-MM-DD)
        helpful_votes: Number of "helpful" votes
    """
    id: str
    author_name: str
    rating: int
    content: str
    date: str
    helpful_votes: int = 0

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> 'Review':
        """Build a review from a loose record, defaulting unset fields."""
        return cls(
            id=str(record.get('id', '')),
            author_name=str(record.get('author_name') or ''),
            rating=_to_int(record.get('rating')),
            content=str(record.get('content') or ''),
            date=str(record.get('date') or ''),
            helpful_votes=_to_int(record.get('helpful_votes'))
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0
