import pytest
from decimal import Decimal
from django.core.cache import cache
from rest_framework.test import APIClient
from apps.products.models import Product
from apps.reviews.models import Review
from apps.products.services import recompute_product_stats


class FakeAssistant:
    """Stands in for ReviewAssistantClient and records the calls it gets."""

    def __init__(self, summary='Reviewers love it.', error=None):
        self.summary = summary
        self.error = error
        self.summary_calls = []

    def generate_summary(self, product_id, product_name, reviews):
        self.summary_calls.append(product_id)
        if self.error:
            raise self.error
        return self.summary


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """Return an API client."""
    return APIClient()


@pytest.fixture
def fake_assistant(monkeypatch):
    """Replace the assistant backend with a FakeAssistant."""
    assistant = FakeAssistant()
    monkeypatch.setattr('apps.assistant.services.get_assistant_client', lambda: assistant)
    return assistant


@pytest.fixture
def make_product(db):
    """Factory creating a product with categories."""
    def _make(name='Test Product', categories=(), price='10.00', description=None, **kwargs):
        product = Product.objects.create(
            name=name,
            description=description or f'{name} description',
            price=Decimal(price),
            **kwargs
        )
        product.set_categories(categories)
        return product
    return _make


@pytest.fixture
def add_ratings():
    """Insert reviews directly and bring product statistics up to date."""
    def _add(product, ratings):
        for rating in ratings:
            Review.objects.create(
                product=product,
                reviewer_name='Tester',
                comment='A review for testing.',
                rating=rating,
            )
        recompute_product_stats(product_id=product.id)
        product.refresh_from_db()
        return product
    return _add


@pytest.fixture
def phone(make_product):
    return make_product(name='iPhone 15 Pro', categories=['Electronics', 'Smartphones'], price='999.99')


@pytest.fixture
def catalog(make_product):
    """A small catalog across Gaming and Audio."""
    return [
        make_product(name='Razer DeathAdder V3', categories=['Gaming', 'Accessories'], price='149.99'),
        make_product(name='PS5 DualSense Controller', categories=['Gaming', 'Accessories'], price='69.99'),
        make_product(name='Asus ROG Zephyrus', categories=['Laptops', 'Gaming'], price='1799.00'),
        make_product(name='Sony WH-1000XM5', categories=['Audio', 'Electronics'], price='349.99'),
        make_product(name='JBL Flip 6', categories=['Audio', 'Electronics'], price='129.95'),
    ]
