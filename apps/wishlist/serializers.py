from rest_framework import serializers


class WishlistToggleSerializer(serializers.Serializer):
    """Result of toggling a product on the caller's wishlist."""

    productId = serializers.IntegerField()
    wishlisted = serializers.BooleanField()
