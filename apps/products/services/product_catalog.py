"""Product catalog service - filtering, listings, detail and hero statistics."""

import logging
from dataclasses import dataclass
from typing import Optional

from django.db.models import Count, Q, QuerySet, Sum

from apps.assistant.services import get_review_summary
from apps.core.pagination import PageResult, paginate, parse_sort
from apps.reviews.models import MAX_RATING, MIN_RATING, Review
from ..models import Product
from .exceptions import ProductNotFoundError
from .rating_aggregation import round_rating

logger = logging.getLogger(__name__)

ALL_CATEGORIES = 'all'

PRODUCT_SORT_FIELDS = {
    'id': 'id',
    'name': 'name',
    'price': 'price',
    'averageRating': 'average_rating',
    'reviewCount': 'review_count',
    'createdAt': 'created_at',
}
DEFAULT_PRODUCT_SORT = 'name,asc'


@dataclass
class ProductDetail:
    """Product plus the per-star histogram and optional AI summary."""
    product: Product
    rating_breakdown: dict
    ai_summary: Optional[str] = None


def normalize_filter(raw: Optional[str]) -> Optional[str]:
    """Map the 'no filter' sentinels (None, blank) to None, otherwise the stripped value."""
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def normalize_category(raw: Optional[str]) -> Optional[str]:
    """Like normalize_filter, but 'All' (any case) also means no category filter."""
    value = normalize_filter(raw)
    if value is not None and value.lower() == ALL_CATEGORIES:
        return None
    return value


def _category_predicate(category: str) -> Q:
    return Q(categories__name=category)


def _search_predicate(search: str) -> Q:
    return Q(name__icontains=search)


# (has_category, has_search) -> predicate
FILTER_COMBINATIONS = {
    (True, True): lambda category, search: _category_predicate(category) & _search_predicate(search),
    (True, False): lambda category, search: _category_predicate(category),
    (False, True): lambda category, search: _search_predicate(search),
    (False, False): lambda category, search: Q(),
}


def filter_products(*, category: Optional[str] = None, search: Optional[str] = None) -> QuerySet[Product]:
    """
    Products matching the category and name filters.

    Both listings and hero statistics go through here so they always agree
    on what "matching" means.

    Args:
        category: Exact category label. None, blank or 'All' means no filter.
        search: Case-insensitive substring of the product name. None or blank means no filter.

    Returns:
        Unordered QuerySet of Product
    """
    category = normalize_category(category)
    search = normalize_filter(search)
    combination = (category is not None, search is not None)

    logger.debug(
        "Filtering products: has_category=%s, has_search=%s, search=%r",
        combination[0], combination[1], search,
    )

    predicate = FILTER_COMBINATIONS[combination](category, search)
    return Product.objects.filter(predicate)


def list_products(
    *,
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: int = 0,
    size: int = 10,
    sort: Optional[str] = DEFAULT_PRODUCT_SORT
) -> PageResult:
    """
    One page of filtered, sorted products.

    Args:
        category: Category filter (see filter_products)
        search: Name search (see filter_products)
        page: Zero-based page index
        size: Page size
        sort: 'field[,asc|desc]' using API field names

    Returns:
        PageResult of Product

    Raises:
        InvalidSortError: If the sort field is not sortable
        InvalidPageError: If page or size is out of range
    """
    ordering = parse_sort(sort, allowed=PRODUCT_SORT_FIELDS, default=DEFAULT_PRODUCT_SORT)
    queryset = (
        filter_products(category=category, search=search)
        .prefetch_related('categories')
        .order_by(*ordering)
    )
    return paginate(queryset, page=page, size=size)


def get_product_by_id(*, product_id: int) -> Product:
    """
    Retrieve a product by ID.

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    try:
        return Product.objects.prefetch_related('categories').get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError("Product not found")


def get_rating_breakdown(*, product_id: int) -> dict[int, int]:
    """
    Number of reviews per star value.

    Every rating 1-5 is present, defaulting to 0.

    Example:
        >>> get_rating_breakdown(product_id=product.id)  # ratings 5, 5, 3, 1
        {1: 1, 2: 0, 3: 1, 4: 0, 5: 2}
    """
    breakdown = {rating: 0 for rating in range(MIN_RATING, MAX_RATING + 1)}

    # order_by() clears the default ordering so GROUP BY is on rating only
    counts = (
        Review.objects
        .filter(product_id=product_id)
        .order_by()
        .values('rating')
        .annotate(count=Count('id'))
    )
    for row in counts:
        breakdown[row['rating']] = row['count']

    return breakdown


def get_product_detail(*, product_id: int) -> ProductDetail:
    """
    Product with rating histogram and AI review summary.

    The summary is best effort: if the assistant fails the detail is
    returned without one.

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    product = get_product_by_id(product_id=product_id)
    detail = ProductDetail(
        product=product,
        rating_breakdown=get_rating_breakdown(product_id=product.id),
    )

    if any(detail.rating_breakdown.values()):
        try:
            detail.ai_summary = get_review_summary(product=product)
        except Exception:
            logger.exception("Error generating AI summary for product %s", product.id)

    return detail


def get_global_stats(*, category: Optional[str] = None, search: Optional[str] = None) -> dict:
    """
    Totals for the hero section over the same filter as list_products.

    Returns:
        Dictionary with:
        - total_products: int - Number of matching products
        - total_reviews: int - Number of reviews of matching products
        - average_rating: Decimal - Mean rating over those reviews, one decimal, 0.0 if none
    """
    products = filter_products(category=category, search=search)

    review_totals = (
        Review.objects
        .filter(product__in=products.values('id'))
        .aggregate(total=Sum('rating'), count=Count('id'))
    )

    return {
        'total_products': products.count(),
        'total_reviews': review_totals['count'],
        'average_rating': round_rating(review_totals['total'] or 0, review_totals['count']),
    }
