"""
Wishlist service - existence-based toggle of saved products.

The unique (user_id, product) constraint decides membership, so two
concurrent toggles for the same pair end in a consistent state.
"""

import logging

from django.db import IntegrityError, transaction

from apps.products.models import Product
from .exceptions import ProductNotFoundError
from .models import WishlistItem

logger = logging.getLogger(__name__)


@transaction.atomic
def toggle_wishlist(*, user_id: str, product_id: int) -> bool:
    """
    Add the product to the caller's wishlist, or remove it if already there.

    Args:
        user_id: Caller id from X-User-ID
        product_id: Product to toggle

    Returns:
        True if the product is wishlisted after the call, False if it was removed

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    if not Product.objects.filter(id=product_id).exists():
        raise ProductNotFoundError("Product not found")

    deleted, _ = WishlistItem.objects.filter(user_id=user_id, product_id=product_id).delete()
    if deleted:
        return False

    try:
        with transaction.atomic():
            WishlistItem.objects.create(user_id=user_id, product_id=product_id)
    except IntegrityError:
        logger.info("Concurrent wishlist insert for %s / product %s ignored", user_id, product_id)

    return True


def get_wishlist(*, user_id: str) -> list[int]:
    """Product IDs on the caller's wishlist, oldest first."""
    return list(
        WishlistItem.objects
        .filter(user_id=user_id)
        .order_by('added_at', 'id')
        .values_list('product_id', flat=True)
    )
