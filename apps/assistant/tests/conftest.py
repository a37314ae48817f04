import pytest
from decimal import Decimal
from django.core.cache import cache
from rest_framework.test import APIClient
from apps.products.models import Product
from apps.reviews.models import Review


class FakeAssistant:
    """Stands in for ReviewAssistantClient and records the calls it gets."""

    def __init__(self):
        self.answer = 'Reviewers say the battery lasts a full day.'
        self.summary = 'Reviewers love the screen.'
        self.error = None
        self.chat_calls = []
        self.summary_calls = []

    def generate_summary(self, product_id, product_name, reviews):
        self.summary_calls.append((product_id, product_name, list(reviews)))
        if self.error:
            raise self.error
        return self.summary

    def chat(self, product_id, question, reviews):
        self.chat_calls.append((product_id, question, list(reviews)))
        if self.error:
            raise self.error
        return self.answer


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def fake_assistant(monkeypatch):
    """Replace the assistant backend with a FakeAssistant."""
    assistant = FakeAssistant()
    monkeypatch.setattr('apps.assistant.services.get_assistant_client', lambda: assistant)
    return assistant


@pytest.fixture
def chat_product(db):
    """Product with two reviews."""
    product = Product.objects.create(
        name='Samsung Galaxy S24 Ultra',
        description='AI-powered smartphone with S-Pen.',
        price=Decimal('1199.99'),
        review_count=2,
        average_rating=Decimal('4.5'),
    )
    Review.objects.create(product=product, reviewer_name='Emma', comment='Battery lasts all day long.', rating=5)
    Review.objects.create(product=product, reviewer_name='James', comment='Camera is great, a bit heavy.', rating=4)
    return product


@pytest.fixture
def empty_product(db):
    return Product.objects.create(
        name='Nomad Base One',
        description='Premium MagSafe charger.',
        price=Decimal('99.95'),
    )
