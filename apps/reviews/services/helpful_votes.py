"""
Helpful vote service - per-caller toggle of a review's helpful marker.

Each (user_id, review) pair is either voted or not voted. Every identified
call flips the state and applies the matching +1/-1 to helpful_count, with
the count floored at zero. The unique (user_id, review) constraint on
ReviewVote decides the state; the count only moves when a row was really
inserted or deleted, so duplicate concurrent toggles cannot both apply the
same delta.

Anonymous calls only increment and cannot be undone. Set
HELPFUL_VOTES_REQUIRE_USER_ID to reject them instead.
"""

import logging
from typing import Optional

from django.conf import settings
from django.db import IntegrityError, transaction

from apps.reviews.models import Review, ReviewVote
from .exceptions import ReviewNotFoundError, AnonymousVoteNotAllowedError

logger = logging.getLogger(__name__)


@transaction.atomic
def toggle_helpful(*, review_id: int, user_id: Optional[str] = None) -> Review:
    """
    Mark or unmark a review as helpful.

    Args:
        review_id: Review being voted
        user_id: Caller id from X-User-ID, None for anonymous callers

    Returns:
        Updated Review instance

    Raises:
        ReviewNotFoundError: If review doesn't exist
        AnonymousVoteNotAllowedError: If user_id is None and anonymous votes are disabled

    Example:
        >>> toggle_helpful(review_id=7, user_id='u1').helpful_count
        1
        >>> toggle_helpful(review_id=7, user_id='u1').helpful_count
        0
    """
    try:
        review = (
            Review.objects
            .select_for_update()
            .select_related('product')
            .get(id=review_id)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    count = review.helpful_count or 0

    if user_id is None:
        if settings.HELPFUL_VOTES_REQUIRE_USER_ID:
            raise AnonymousVoteNotAllowedError("X-User-ID header is required to vote")
        count += 1
    else:
        deleted, _ = ReviewVote.objects.filter(user_id=user_id, review=review).delete()
        if deleted:
            count = max(count - 1, 0)
        else:
            try:
                with transaction.atomic():
                    ReviewVote.objects.create(user_id=user_id, review=review)
            except IntegrityError:
                # A concurrent toggle inserted the same vote and applied the increment
                logger.info("Duplicate helpful vote by %s on review %s ignored", user_id, review_id)
            else:
                count += 1

    review.helpful_count = count
    review.save(update_fields=['helpful_count'])

    logger.debug("Review %s helpful_count=%s after vote by %s", review_id, count, user_id or 'anonymous')
    return review


def get_user_voted_review_ids(*, user_id: str) -> list[int]:
    """
    IDs of reviews the caller currently counts as helpful, oldest vote first.
    """
    return list(
        ReviewVote.objects
        .filter(user_id=user_id)
        .order_by('created_at', 'id')
        .values_list('review_id', flat=True)
    )
