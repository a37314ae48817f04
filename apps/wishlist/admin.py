from django.contrib import admin
from .models import WishlistItem


@admin.register(WishlistItem)
class WishlistItemAdmin(admin.ModelAdmin):
    list_display = ['user_id', 'product', 'added_at']
    search_fields = ['user_id', 'product__name']
    readonly_fields = ['added_at']
    date_hierarchy = 'added_at'
    ordering = ['-added_at']

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('product')
