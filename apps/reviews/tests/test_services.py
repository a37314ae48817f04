"""
Tests for reviews services layer.

Covers:
- Review submission and statistics
- Review listing
- Helpful vote toggling
"""

import pytest
from decimal import Decimal
from django.core.cache import cache
from django.db import IntegrityError, transaction

from apps.assistant.services import SUMMARY_CACHE_KEY
from apps.core.exceptions import InvalidSortError
from apps.reviews.services import (
    add_review,
    get_review_by_id,
    list_reviews,
    toggle_helpful,
    get_user_voted_review_ids,
    ReviewNotFoundError,
    ProductNotFoundError,
    InvalidRatingError,
    InvalidReviewError,
    AnonymousVoteNotAllowedError,
)
from apps.reviews.models import Review, ReviewVote


def submit(product, rating, name='Michael', comment='Performance is top notch.'):
    return add_review(product_id=product.id, reviewer_name=name, comment=comment, rating=rating)


# ============================================================================
# REVIEW MANAGEMENT TESTS
# ============================================================================

@pytest.mark.django_db
class TestAddReview:
    """Test review submission."""

    def test_add_review_success(self, review_product):
        review = submit(review_product, 4)

        assert review.id is not None
        assert review.helpful_count == 0
        assert review.product == review_product

    def test_add_review_updates_stats(self, review_product):
        for rating in [5, 4, 3]:
            submit(review_product, rating)

        review_product.refresh_from_db()
        assert review_product.average_rating == Decimal('4.0')
        assert review_product.review_count == 3
        assert review_product.price == Decimal('999.99')

    def test_stats_match_reviews_after_each_insert(self, review_product):
        ratings = [1, 2, 2, 5, 4]
        for i, rating in enumerate(ratings, start=1):
            submit(review_product, rating)
            review_product.refresh_from_db()

            expected = (Decimal(sum(ratings[:i])) / i).quantize(Decimal('0.1'))
            assert review_product.review_count == i
            assert review_product.average_rating == expected

    def test_add_review_trims_text(self, review_product):
        review = submit(review_product, 5, name='  Emma  ', comment='   Worth every penny.   ')

        assert review.reviewer_name == 'Emma'
        assert review.comment == 'Worth every penny.'

    @pytest.mark.parametrize('rating', [0, 6, -1])
    def test_add_review_invalid_rating(self, review_product, rating):
        with pytest.raises(InvalidRatingError):
            submit(review_product, rating)

        assert not Review.objects.exists()

    def test_add_review_rating_must_be_integer(self, review_product):
        with pytest.raises(InvalidRatingError):
            submit(review_product, 4.5)

    def test_add_review_name_too_short(self, review_product):
        with pytest.raises(InvalidReviewError):
            submit(review_product, 4, name=' A ')

    def test_add_review_comment_too_short(self, review_product):
        with pytest.raises(InvalidReviewError):
            submit(review_product, 4, comment='Too short')

    def test_add_review_comment_too_long(self, review_product):
        with pytest.raises(InvalidReviewError):
            submit(review_product, 4, comment='x' * 501)

    def test_add_review_unknown_product(self, review_product):
        with pytest.raises(ProductNotFoundError):
            add_review(product_id=999, reviewer_name='Michael', comment='Performance is top notch.', rating=4)

    def test_add_review_evicts_cached_summary(self, review_product, django_capture_on_commit_callbacks):
        key = SUMMARY_CACHE_KEY.format(product_id=review_product.id)
        cache.set(key, 'Old summary')

        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            submit(review_product, 2)

        assert len(callbacks) == 1
        assert cache.get(key) is None

    def test_get_review_by_id(self, review):
        assert get_review_by_id(review_id=review.id) == review

    def test_get_review_by_id_not_found(self):
        with pytest.raises(ReviewNotFoundError):
            get_review_by_id(review_id=999)


@pytest.mark.django_db
class TestListReviews:
    """Test review listing."""

    def test_newest_first(self, review_product):
        first = submit(review_product, 3)
        second = submit(review_product, 4)

        page = list_reviews(product_id=review_product.id)

        assert [r.id for r in page.items] == [second.id, first.id]

    def test_rating_filter(self, review_product):
        for rating in [5, 5, 3, 1]:
            submit(review_product, rating)

        page = list_reviews(product_id=review_product.id, rating=5)

        assert page.total_elements == 2
        assert all(r.rating == 5 for r in page.items)

    def test_sort_by_helpful_count(self, review_product):
        low = submit(review_product, 3)
        high = submit(review_product, 4)
        Review.objects.filter(id=high.id).update(helpful_count=7)

        page = list_reviews(product_id=review_product.id, sort='helpfulCount,desc')

        assert [r.id for r in page.items] == [high.id, low.id]

    def test_pagination(self, review_product):
        for _ in range(25):
            submit(review_product, 4)

        assert len(list_reviews(product_id=review_product.id, page=0, size=10).items) == 10
        assert len(list_reviews(product_id=review_product.id, page=2, size=10).items) == 5

    def test_invalid_sort(self, review_product):
        with pytest.raises(InvalidSortError):
            list_reviews(product_id=review_product.id, sort='comment,asc')

    def test_unknown_product(self):
        with pytest.raises(ProductNotFoundError):
            list_reviews(product_id=999)


# ============================================================================
# HELPFUL VOTE TESTS
# ============================================================================

@pytest.mark.django_db
class TestToggleHelpful:
    """Test helpful vote toggling."""

    def test_first_vote_increments(self, review):
        updated = toggle_helpful(review_id=review.id, user_id='user-1')

        assert updated.helpful_count == 1
        assert ReviewVote.objects.filter(user_id='user-1', review=review).exists()

    def test_double_toggle_restores_count(self, review):
        toggle_helpful(review_id=review.id, user_id='user-1')
        updated = toggle_helpful(review_id=review.id, user_id='user-1')

        assert updated.helpful_count == 0
        assert not ReviewVote.objects.filter(user_id='user-1', review=review).exists()

    def test_votes_from_different_users(self, review):
        toggle_helpful(review_id=review.id, user_id='user-1')
        updated = toggle_helpful(review_id=review.id, user_id='user-2')

        assert updated.helpful_count == 2

    def test_count_floored_at_zero(self, review):
        ReviewVote.objects.create(user_id='user-1', review=review)

        updated = toggle_helpful(review_id=review.id, user_id='user-1')

        assert updated.helpful_count == 0

    def test_null_count_treated_as_zero(self, legacy_review):
        updated = toggle_helpful(review_id=legacy_review.id, user_id='user-1')

        assert updated.helpful_count == 1

    def test_anonymous_votes_only_increase(self, review):
        for expected in [1, 2, 3]:
            updated = toggle_helpful(review_id=review.id)
            assert updated.helpful_count == expected

        assert not ReviewVote.objects.exists()

    def test_anonymous_votes_can_be_disabled(self, review, settings):
        settings.HELPFUL_VOTES_REQUIRE_USER_ID = True

        with pytest.raises(AnonymousVoteNotAllowedError):
            toggle_helpful(review_id=review.id)

        review.refresh_from_db()
        assert review.helpful_count == 0

    def test_concurrent_duplicate_vote_applies_no_delta(self, review, monkeypatch):
        def concurrent_insert(**kwargs):
            raise IntegrityError('UNIQUE constraint failed: review_votes.user_id, review_votes.review_id')

        monkeypatch.setattr(ReviewVote.objects, 'create', concurrent_insert)

        updated = toggle_helpful(review_id=review.id, user_id='user-1')

        assert updated.helpful_count == 0
        review.refresh_from_db()
        assert review.helpful_count == 0
        assert ReviewVote.objects.count() == 0

    def test_transaction_usable_after_duplicate_vote(self, review, monkeypatch):
        def concurrent_insert(**kwargs):
            raise IntegrityError('UNIQUE constraint failed')

        with transaction.atomic():
            monkeypatch.setattr(ReviewVote.objects, 'create', concurrent_insert)
            toggle_helpful(review_id=review.id, user_id='user-1')
            monkeypatch.undo()

            updated = toggle_helpful(review_id=review.id, user_id='user-2')

        assert updated.helpful_count == 1
        assert list(ReviewVote.objects.values_list('user_id', flat=True)) == ['user-2']

    def test_review_not_found(self):
        with pytest.raises(ReviewNotFoundError):
            toggle_helpful(review_id=999, user_id='user-1')

    def test_voted_review_ids(self, review_product):
        first = submit(review_product, 5)
        second = submit(review_product, 4)
        toggle_helpful(review_id=second.id, user_id='user-1')
        toggle_helpful(review_id=first.id, user_id='user-1')
        toggle_helpful(review_id=first.id, user_id='user-2')

        assert get_user_voted_review_ids(user_id='user-1') == [second.id, first.id]
        assert get_user_voted_review_ids(user_id='user-3') == []
