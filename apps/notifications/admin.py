from django.contrib import admin
from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    """Admin interface for Notifications."""

    list_display = ['user_id', 'title', 'product', 'is_read', 'created_at']
    list_filter = ['is_read', 'created_at']
    search_fields = ['user_id', 'title', 'message']
    readonly_fields = ['created_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    actions = ['mark_read']

    def mark_read(self, request, queryset):
        updated = queryset.update(is_read=True)
        self.message_user(request, f"Marked {updated} notifications as read")
    mark_read.short_description = "Mark as read"
