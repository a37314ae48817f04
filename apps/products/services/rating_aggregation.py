"""Rating aggregation service - keeps product statistics in step with reviews."""

from django.db import transaction
from django.db.models import Count, Sum
from decimal import Decimal, ROUND_HALF_UP

from ..models import Product
from .exceptions import ProductNotFoundError

ONE_DECIMAL = Decimal('0.1')


def round_rating(total: int, count: int) -> Decimal:
    """
    Mean of count ratings summing to total, rounded half-up to one decimal.

    Returns Decimal('0.0') when count is zero.

    Example:
        >>> round_rating(12, 3)
        Decimal('4.0')
        >>> round_rating(9, 2)
        Decimal('4.5')
    """
    if not count:
        return Decimal('0.0')
    return (Decimal(total) / Decimal(count)).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


@transaction.atomic
def recompute_product_stats(*, product_id: int) -> Product:
    """
    Recalculate and store a product's average rating and review count.

    Callers that insert a review must call this inside the same transaction
    so the new review is never visible without its statistics. The product
    row is locked with select_for_update() so concurrent inserts for the
    same product recompute one after the other.

    Args:
        product_id: Product primary key

    Returns:
        Updated Product instance

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    try:
        product = (
            Product.objects
            .select_for_update()
            .get(id=product_id)
        )
    except Product.DoesNotExist:
        raise ProductNotFoundError(f"Product {product_id} not found")

    aggregates = product.reviews.aggregate(
        total=Sum('rating'),
        count=Count('id')
    )

    product.review_count = aggregates['count']
    product.average_rating = round_rating(aggregates['total'] or 0, aggregates['count'])
    product.save(update_fields=['average_rating', 'review_count', 'updated_at'])

    return product
