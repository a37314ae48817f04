# ==========================================
# apps/wishlist/models.py
# ==========================================

from django.db import models


class WishlistItem(models.Model):
    """Membership of a product in a caller's wishlist."""

    user_id = models.CharField(max_length=128, db_index=True)
    product = models.ForeignKey('products.Product', on_delete=models.CASCADE, related_name='wishlist_items')
    added_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'wishlist_items'
        unique_together = [['user_id', 'product']]
        ordering = ['added_at']

    def __str__(self):
        return f"{self.user_id} - {self.product.name}"
