# ==========================================
# apps/reviews/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator

MIN_RATING = 1
MAX_RATING = 5
REVIEWER_NAME_MIN_LENGTH = 2
REVIEWER_NAME_MAX_LENGTH = 50
COMMENT_MIN_LENGTH = 10
COMMENT_MAX_LENGTH = 500


class Review(models.Model):
    """Product review. Never edited after submission except for helpful_count."""

    product = models.ForeignKey('products.Product', on_delete=models.CASCADE, related_name='reviews')
    reviewer_name = models.CharField(max_length=REVIEWER_NAME_MAX_LENGTH)
    comment = models.TextField(max_length=COMMENT_MAX_LENGTH)
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(MIN_RATING), MaxValueValidator(MAX_RATING)])
    # Nullable for rows imported before the column had a default
    helpful_count = models.PositiveIntegerField(null=True, default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'reviews'
        indexes = [
            models.Index(fields=['product', 'rating'], name='reviews_product_rating_idx'),
            models.Index(fields=['product', 'created_at'], name='reviews_product_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.reviewer_name} - {self.product.name} ({self.rating}★)"


class ReviewVote(models.Model):
    """A caller's helpful vote. Existence means the vote currently counts."""

    user_id = models.CharField(max_length=128, db_index=True)
    review = models.ForeignKey(Review, on_delete=models.CASCADE, related_name='votes')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'review_votes'
        unique_together = [['user_id', 'review']]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.user_id} -> review {self.review_id}"
