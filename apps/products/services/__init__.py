"""
Products services - Business logic layer.

This package contains the catalog operations:
- Rating aggregation (denormalized statistics)
- Filtering, listings and product detail
- Hero statistics
"""

# Domain Exceptions
from .exceptions import (
    ProductsServiceError,
    ProductNotFoundError,
)

# Rating Aggregation
from .rating_aggregation import (
    recompute_product_stats,
    round_rating,
)

# Catalog Queries
from .product_catalog import (
    ProductDetail,
    normalize_filter,
    normalize_category,
    filter_products,
    list_products,
    get_product_by_id,
    get_rating_breakdown,
    get_product_detail,
    get_global_stats,
)

__all__ = [
    # Exceptions
    'ProductsServiceError',
    'ProductNotFoundError',
    # Rating Aggregation
    'recompute_product_stats',
    'round_rating',
    # Catalog Queries
    'ProductDetail',
    'normalize_filter',
    'normalize_category',
    'filter_products',
    'list_products',
    'get_product_by_id',
    'get_rating_breakdown',
    'get_product_detail',
    'get_global_stats',
]
