"""Review management service - submission and listing of product reviews."""

import logging
from typing import Optional

from django.db import transaction

from apps.assistant.services import invalidate_review_summary
from apps.core.pagination import PageResult, paginate, parse_sort
from apps.products.models import Product
from apps.products.services.rating_aggregation import recompute_product_stats
from apps.reviews.models import (
    Review,
    MIN_RATING,
    MAX_RATING,
    REVIEWER_NAME_MIN_LENGTH,
    REVIEWER_NAME_MAX_LENGTH,
    COMMENT_MIN_LENGTH,
    COMMENT_MAX_LENGTH,
)
from .exceptions import (
    ReviewNotFoundError,
    ProductNotFoundError,
    InvalidRatingError,
    InvalidReviewError,
)

logger = logging.getLogger(__name__)

REVIEW_SORT_FIELDS = {
    'id': 'id',
    'createdAt': 'created_at',
    'rating': 'rating',
    'helpfulCount': 'helpful_count',
}
DEFAULT_REVIEW_SORT = 'createdAt,desc'


def _validate_length(field: str, value: str, min_length: int, max_length: int) -> str:
    value = (value or '').strip()
    if not (min_length <= len(value) <= max_length):
        raise InvalidReviewError(
            f"{field} must be between {min_length} and {max_length} characters"
        )
    return value


@transaction.atomic
def add_review(
    *,
    product_id: int,
    reviewer_name: str,
    comment: str,
    rating: int
) -> Review:
    """
    Submit a review for a product.

    This operation:
    1. Validates rating range and text lengths
    2. Locks the product row
    3. Creates the review with helpful_count = 0
    4. Recomputes product statistics in the same transaction
    5. Evicts the cached AI summary once the transaction commits

    Args:
        product_id: Product being reviewed
        reviewer_name: Display name (2-50 characters after trimming)
        comment: Review text (10-500 characters after trimming)
        rating: Star rating (1-5)

    Returns:
        Created Review instance

    Raises:
        InvalidRatingError: If rating not in 1-5 range
        InvalidReviewError: If name or comment length is out of range
        ProductNotFoundError: If product doesn't exist
    """
    if isinstance(rating, bool) or not isinstance(rating, int) or not (MIN_RATING <= rating <= MAX_RATING):
        raise InvalidRatingError("Rating must be between 1 and 5")

    reviewer_name = _validate_length(
        'Reviewer name', reviewer_name, REVIEWER_NAME_MIN_LENGTH, REVIEWER_NAME_MAX_LENGTH
    )
    comment = _validate_length('Comment', comment, COMMENT_MIN_LENGTH, COMMENT_MAX_LENGTH)

    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError("Product not found")

    review = Review.objects.create(
        product=product,
        reviewer_name=reviewer_name,
        comment=comment,
        rating=rating,
        helpful_count=0,
    )

    recompute_product_stats(product_id=product.id)

    transaction.on_commit(lambda: invalidate_review_summary(product_id=product.id))

    logger.info("Review %s added to product %s (rating %s)", review.id, product.id, rating)
    return review


def get_review_by_id(*, review_id: int) -> Review:
    """
    Retrieve a review by ID.

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    try:
        return Review.objects.select_related('product').get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")


def list_reviews(
    *,
    product_id: int,
    rating: Optional[int] = None,
    page: int = 0,
    size: int = 10,
    sort: Optional[str] = DEFAULT_REVIEW_SORT
) -> PageResult:
    """
    One page of a product's reviews, newest first unless sort says otherwise.

    Args:
        product_id: Product whose reviews to list
        rating: Only reviews with exactly this rating
        page: Zero-based page index
        size: Page size
        sort: 'field[,asc|desc]' using API field names

    Returns:
        PageResult of Review

    Raises:
        ProductNotFoundError: If product doesn't exist
        InvalidSortError: If the sort field is not sortable
        InvalidPageError: If page or size is out of range
    """
    if not Product.objects.filter(id=product_id).exists():
        raise ProductNotFoundError("Product not found")

    ordering = parse_sort(sort, allowed=REVIEW_SORT_FIELDS, default=DEFAULT_REVIEW_SORT)

    queryset = Review.objects.filter(product_id=product_id)
    if rating is not None:
        queryset = queryset.filter(rating=rating)

    return paginate(queryset.order_by(*ordering), page=page, size=size)
