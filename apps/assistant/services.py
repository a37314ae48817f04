"""Assistant services - cached review summaries and product Q&A."""

import logging
from typing import Optional

from django.conf import settings
from django.core.cache import cache

from apps.products.models import Product
from apps.reviews.models import Review
from .client import ReviewAssistantClient
from .exceptions import InvalidQuestionError, ProductNotFoundError

logger = logging.getLogger(__name__)

SUMMARY_CACHE_KEY = 'ai-summary:{product_id}'


def get_assistant_client() -> ReviewAssistantClient:
    """Client built from settings. Tests monkeypatch this."""
    return ReviewAssistantClient.from_settings()


def get_review_summary(*, product: Product) -> Optional[str]:
    """
    Return the AI summary of a product's reviews, generating it on a cache miss.

    Summaries are cached per product until a review is added
    (see invalidate_review_summary) or ASSISTANT_SUMMARY_TTL expires.

    Returns:
        Summary text, or None when the product has no reviews

    Raises:
        AssistantUnavailableError: If the summary has to be generated and the backend fails
    """
    key = SUMMARY_CACHE_KEY.format(product_id=product.id)
    summary = cache.get(key)
    if summary is not None:
        return summary

    reviews = list(Review.objects.filter(product=product).order_by('-created_at', '-id'))
    if not reviews:
        return None

    summary = get_assistant_client().generate_summary(product.id, product.name, reviews)
    cache.set(key, summary, timeout=settings.ASSISTANT_SUMMARY_TTL)
    return summary


def invalidate_review_summary(*, product_id: int) -> None:
    """Drop the cached summary so the next detail view regenerates it."""
    cache.delete(SUMMARY_CACHE_KEY.format(product_id=product_id))


def chat_about_product(*, product_id: int, question: Optional[str]) -> str:
    """
    Answer a question about a product from its reviews.

    Args:
        product_id: Product primary key
        question: Shopper question

    Returns:
        Answer text

    Raises:
        InvalidQuestionError: If question is missing or blank
        ProductNotFoundError: If product doesn't exist
        AssistantUnavailableError: If the backend fails
    """
    if question is None or not str(question).strip():
        raise InvalidQuestionError("Question is required")

    if not Product.objects.filter(id=product_id).exists():
        raise ProductNotFoundError("Product not found")

    reviews = list(Review.objects.filter(product_id=product_id).order_by('-created_at', '-id'))
    logger.info("Answering question about product %s from %d reviews", product_id, len(reviews))

    return get_assistant_client().chat(product_id, str(question).strip(), reviews)
