from rest_framework import serializers
from .models import Product
from apps.core.serializers import PageQuerySerializer


class ProductSerializer(serializers.ModelSerializer):
    """Product as shown in listings."""

    categories = serializers.SerializerMethodField()
    imageUrl = serializers.CharField(source='image_url', read_only=True)
    averageRating = serializers.DecimalField(source='average_rating', max_digits=3, decimal_places=1, read_only=True)
    reviewCount = serializers.IntegerField(source='review_count', read_only=True)

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'description',
            'categories',
            'price',
            'imageUrl',
            'averageRating',
            'reviewCount',
        ]
        read_only_fields = fields

    def get_categories(self, obj) -> list[str]:
        return obj.category_names


class ProductDetailSerializer(ProductSerializer):
    """
    Product with rating histogram and AI summary.

    Expects the ProductDetail from get_product_detail in context['detail'].
    """

    ratingBreakdown = serializers.SerializerMethodField()
    aiSummary = serializers.SerializerMethodField()

    class Meta(ProductSerializer.Meta):
        fields = ProductSerializer.Meta.fields + ['ratingBreakdown', 'aiSummary']
        read_only_fields = fields

    def get_ratingBreakdown(self, obj) -> dict[str, int]:
        return {str(rating): count for rating, count in self.context['detail'].rating_breakdown.items()}

    def get_aiSummary(self, obj) -> str | None:
        return self.context['detail'].ai_summary


class ProductFilterQuerySerializer(serializers.Serializer):
    """Category and name filters shared by listings and statistics."""

    category = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    search = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)


class ProductListQuerySerializer(ProductFilterQuerySerializer, PageQuerySerializer):
    """Query parameters of GET /api/products/."""
    pass


class GlobalStatsSerializer(serializers.Serializer):
    """Hero-section totals over the filtered catalog."""

    totalProducts = serializers.IntegerField(source='total_products')
    totalReviews = serializers.IntegerField(source='total_reviews')
    averageRating = serializers.DecimalField(source='average_rating', max_digits=3, decimal_places=1)
