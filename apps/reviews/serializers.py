from rest_framework import serializers
from .models import (
    Review,
    MIN_RATING,
    MAX_RATING,
    REVIEWER_NAME_MIN_LENGTH,
    REVIEWER_NAME_MAX_LENGTH,
    COMMENT_MIN_LENGTH,
    COMMENT_MAX_LENGTH,
)
from apps.core.serializers import PageQuerySerializer


class ReviewSerializer(serializers.ModelSerializer):
    """Main review serializer."""

    productId = serializers.IntegerField(source='product_id', read_only=True)
    reviewerName = serializers.CharField(source='reviewer_name', read_only=True)
    helpfulCount = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Review
        fields = [
            'id',
            'productId',
            'reviewerName',
            'comment',
            'rating',
            'helpfulCount',
            'createdAt',
        ]
        read_only_fields = fields

    def get_helpfulCount(self, obj) -> int:
        return obj.helpful_count or 0


class ReviewCreateSerializer(serializers.Serializer):
    """Body of POST /api/products/{id}/reviews/. Text fields are trimmed before length checks."""

    reviewerName = serializers.CharField(
        min_length=REVIEWER_NAME_MIN_LENGTH,
        max_length=REVIEWER_NAME_MAX_LENGTH,
    )
    comment = serializers.CharField(
        min_length=COMMENT_MIN_LENGTH,
        max_length=COMMENT_MAX_LENGTH,
    )
    rating = serializers.IntegerField(min_value=MIN_RATING, max_value=MAX_RATING)


class ReviewListQuerySerializer(PageQuerySerializer):
    """Query parameters of GET /api/products/{id}/reviews/."""

    rating = serializers.IntegerField(required=False)
