"""Domain exceptions for wishlist app."""


class WishlistServiceError(Exception):
    """Base exception for wishlist service errors."""
    pass


class ProductNotFoundError(WishlistServiceError):
    """Wishlisted product does not exist."""
    pass
