"""Domain exceptions for reviews app."""


class ReviewsServiceError(Exception):
    """Base exception for all reviews service errors."""
    pass


class ReviewNotFoundError(ReviewsServiceError):
    """Review does not exist."""
    pass


class ProductNotFoundError(ReviewsServiceError):
    """Reviewed product does not exist."""
    pass


class InvalidRatingError(ReviewsServiceError):
    """Rating must be between 1 and 5."""
    pass


class InvalidReviewError(ReviewsServiceError):
    """Reviewer name or comment is too short or too long."""
    pass


class AnonymousVoteNotAllowedError(ReviewsServiceError):
    """Helpful votes require X-User-ID (HELPFUL_VOTES_REQUIRE_USER_ID)."""
    pass
