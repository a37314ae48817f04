from django.contrib import admin
from .models import Review, ReviewVote


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """Admin interface for Reviews. Reviews are read-only once submitted."""

    list_display = [
        'get_product_name',
        'reviewer_name',
        'rating',
        'helpful_count',
        'created_at'
    ]
    list_filter = ['rating', 'created_at']
    search_fields = ['product__name', 'reviewer_name', 'comment']
    readonly_fields = ['product', 'reviewer_name', 'comment', 'rating', 'helpful_count', 'created_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def get_product_name(self, obj):
        """Display product name in list."""
        return obj.product.name
    get_product_name.short_description = 'Product'
    get_product_name.admin_order_field = 'product__name'

    def has_add_permission(self, request):
        """Reviews go through add_review so product statistics stay in sync."""
        return False

    def get_queryset(self, request):
        """Optimize query with select_related."""
        qs = super().get_queryset(request)
        return qs.select_related('product')


@admin.register(ReviewVote)
class ReviewVoteAdmin(admin.ModelAdmin):
    list_display = ['user_id', 'review', 'created_at']
    search_fields = ['user_id']
    readonly_fields = ['created_at']
    ordering = ['-created_at']
