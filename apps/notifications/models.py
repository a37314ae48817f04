# ==========================================
# apps/notifications/models.py
# ==========================================

from django.db import models


class Notification(models.Model):
    """Inbox message for one caller, optionally about a product."""

    user_id = models.CharField(max_length=128, db_index=True)
    title = models.CharField(max_length=200)
    message = models.TextField()
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='notifications'
    )
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'notifications'
        indexes = [
            models.Index(fields=['user_id', 'is_read'], name='notifications_user_read_idx'),
            models.Index(fields=['user_id', 'created_at'], name='notifications_user_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user_id}: {self.title}"
