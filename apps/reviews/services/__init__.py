"""
Reviews services - Business logic layer.

This package contains all business operations for the reviews app:
- Review submission and listing
- Helpful vote toggling
"""

# Review Management
from .review_management import (
    add_review,
    get_review_by_id,
    list_reviews,
)

# Helpful Votes
from .helpful_votes import (
    toggle_helpful,
    get_user_voted_review_ids,
)

# Domain Exceptions
from .exceptions import (
    ReviewsServiceError,
    ReviewNotFoundError,
    ProductNotFoundError,
    InvalidRatingError,
    InvalidReviewError,
    AnonymousVoteNotAllowedError,
)

__all__ = [
    # Review Management Services
    'add_review',
    'get_review_by_id',
    'list_reviews',
    # Helpful Vote Services
    'toggle_helpful',
    'get_user_voted_review_ids',
    # Exceptions
    'ReviewsServiceError',
    'ReviewNotFoundError',
    'ProductNotFoundError',
    'InvalidRatingError',
    'InvalidReviewError',
    'AnonymousVoteNotAllowedError',
]
