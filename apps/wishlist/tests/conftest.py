import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.products.models import Product


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user_client():
    """Return an API client identifying as caller 'user-1'."""
    client = APIClient()
    client.credentials(HTTP_X_USER_ID='user-1')
    return client


@pytest.fixture
def headphones(db):
    return Product.objects.create(
        name='Sony WH-1000XM5',
        description='Industry-leading noise canceling headphones.',
        price=Decimal('349.99'),
    )


@pytest.fixture
def speaker(db):
    return Product.objects.create(
        name='JBL Flip 6',
        description='Bold sound for every adventure.',
        price=Decimal('129.95'),
    )
