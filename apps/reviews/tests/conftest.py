import pytest
from decimal import Decimal
from django.core.cache import cache
from rest_framework.test import APIClient
from apps.products.models import Product
from apps.reviews.models import Review


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """Return an API client without caller id."""
    return APIClient()


@pytest.fixture
def user_client():
    """Return an API client identifying as caller 'user-1'."""
    client = APIClient()
    client.credentials(HTTP_X_USER_ID='user-1')
    return client


@pytest.fixture
def other_user_client():
    """Return an API client identifying as caller 'user-2'."""
    client = APIClient()
    client.credentials(HTTP_X_USER_ID='user-2')
    return client


@pytest.fixture
def review_product(db):
    """Create and return a product to review."""
    product = Product.objects.create(
        name='iPhone 15 Pro',
        description='The latest iPhone with A17 Pro chip and Titanium design.',
        price=Decimal('999.99'),
    )
    product.set_categories(['Electronics', 'Smartphones'])
    return product


@pytest.fixture
def review(db, review_product):
    """Create and return a review with no helpful votes."""
    return Review.objects.create(
        product=review_product,
        reviewer_name='Sarah',
        comment='Great product, highly recommended!',
        rating=5,
    )


@pytest.fixture
def legacy_review(db, review_product):
    """Review imported before helpful_count had a default."""
    return Review.objects.create(
        product=review_product,
        reviewer_name='David',
        comment='Battery drains a bit fast.',
        rating=3,
        helpful_count=None,
    )
