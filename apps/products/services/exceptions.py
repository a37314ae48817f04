"""Domain exceptions for products app."""


class ProductsServiceError(Exception):
    """Base exception for all products service errors."""
    pass


class ProductNotFoundError(ProductsServiceError):
    """Product does not exist."""
    pass
