"""HTTP client for the AI review assistant.

Speaks the OpenAI-compatible ``/chat/completions`` protocol, so any hosted
or local backend exposing it (OpenAI, Ollama, vLLM) can be configured with
``ASSISTANT_API_URL``, ``ASSISTANT_API_KEY`` and ``ASSISTANT_MODEL``.

Example:
    client = ReviewAssistantClient.from_settings()
    summary = client.generate_summary(product.id, product.name, reviews)
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import httpx
from django.conf import settings

from .exceptions import AssistantNotConfiguredError, AssistantRequestError

logger = logging.getLogger(__name__)

# Keeps prompts bounded for products with many reviews
MAX_PROMPT_REVIEWS = 50

SUMMARY_SYSTEM_PROMPT = (
    "You summarize customer reviews for an online store. Write two or three "
    "sentences covering what reviewers like and dislike. Do not invent facts "
    "that are not in the reviews."
)

CHAT_SYSTEM_PROMPT = (
    "You answer shopper questions about a product using only the customer "
    "reviews provided. If the reviews do not answer the question, say so."
)


@dataclass
class AssistantConfig:
    """Connection settings for the AI backend."""
    base_url: str
    api_key: str
    model: str
    timeout: float = 30.0
    temperature: float = 0.3
    max_tokens: int = 400


def format_reviews(reviews: Iterable) -> str:
    """Render reviews as prompt lines, newest first, capped at MAX_PROMPT_REVIEWS."""
    lines = []
    for review in list(reviews)[:MAX_PROMPT_REVIEWS]:
        comment = ' '.join(review.comment.split())
        lines.append(f"- {review.rating}/5 by {review.reviewer_name}: {comment}")
    return '\n'.join(lines) if lines else '(no reviews yet)'


class ReviewAssistantClient:
    """Synchronous client for summary and Q&A requests."""

    def __init__(self, config: AssistantConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self._transport = transport

    @classmethod
    def from_settings(cls, transport: Optional[httpx.BaseTransport] = None) -> 'ReviewAssistantClient':
        return cls(
            AssistantConfig(
                base_url=settings.ASSISTANT_API_URL,
                api_key=settings.ASSISTANT_API_KEY,
                model=settings.ASSISTANT_MODEL,
                timeout=settings.ASSISTANT_TIMEOUT,
            ),
            transport=transport,
        )

    def generate_summary(self, product_id: int, product_name: str, reviews: Iterable) -> str:
        """
        Summarize the reviews of one product.

        Raises:
            AssistantNotConfiguredError: If no API key is configured
            AssistantRequestError: If the backend call fails
        """
        prompt = (
            f"Product: {product_name} (id {product_id})\n"
            f"Reviews:\n{format_reviews(reviews)}\n\n"
            "Summarize these reviews."
        )
        return self._complete(SUMMARY_SYSTEM_PROMPT, prompt)

    def chat(self, product_id: int, question: str, reviews: Iterable) -> str:
        """
        Answer a shopper question from the reviews of one product.

        Raises:
            AssistantNotConfiguredError: If no API key is configured
            AssistantRequestError: If the backend call fails
        """
        prompt = (
            f"Product id: {product_id}\n"
            f"Reviews:\n{format_reviews(reviews)}\n\n"
            f"Question: {question}"
        )
        return self._complete(CHAT_SYSTEM_PROMPT, prompt)

    def _complete(self, system_prompt: str, prompt: str) -> str:
        if not self.config.api_key:
            raise AssistantNotConfiguredError("AI assistant is not configured")

        payload = {
            'model': self.config.model,
            'messages': [
                {'role': 'system', 'content': system_prompt},
                {'role': 'user', 'content': prompt},
            ],
            'temperature': self.config.temperature,
            'max_tokens': self.config.max_tokens,
        }
        headers = {'Authorization': f'Bearer {self.config.api_key}'}

        try:
            with httpx.Client(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                transport=self._transport,
            ) as client:
                response = client.post('/chat/completions', json=payload, headers=headers)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Assistant request failed with status %s", e.response.status_code
            )
            raise AssistantRequestError(
                f"AI assistant returned status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Assistant request failed: %s", e)
            raise AssistantRequestError("AI assistant is unreachable") from e
        except ValueError as e:
            raise AssistantRequestError("AI assistant returned invalid JSON") from e

        try:
            content = data['choices'][0]['message']['content']
        except (KeyError, IndexError, TypeError) as e:
            raise AssistantRequestError("AI assistant returned an unexpected payload") from e

        if not isinstance(content, str) or not content.strip():
            raise AssistantRequestError("AI assistant returned an empty answer")

        return content.strip()
