from django.contrib import admin
from .models import Category, Product
from .services import recompute_product_stats


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name']
    search_fields = ['name']
    ordering = ['name']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Products."""

    list_display = ['name', 'price', 'average_rating', 'review_count', 'created_at']
    list_filter = ['categories', 'created_at']
    search_fields = ['name', 'description']
    readonly_fields = ['average_rating', 'review_count', 'created_at', 'updated_at']
    filter_horizontal = ['categories']
    ordering = ['name']

    actions = ['recalculate_ratings']

    def recalculate_ratings(self, request, queryset):
        """Recompute stored rating statistics from the reviews."""
        for product in queryset:
            recompute_product_stats(product_id=product.id)
        self.message_user(request, f"Recalculated ratings for {queryset.count()} products")
    recalculate_ratings.short_description = "Recalculate ratings"
