import pytest
from django.core.cache import cache

from apps.assistant.exceptions import AssistantRequestError, InvalidQuestionError, ProductNotFoundError
from apps.assistant.services import (
    SUMMARY_CACHE_KEY,
    chat_about_product,
    get_review_summary,
    invalidate_review_summary,
)


@pytest.mark.django_db
class TestReviewSummary:
    """Test cached review summaries."""

    def test_summary_generated_and_cached(self, chat_product, fake_assistant):
        assert get_review_summary(product=chat_product) == 'Reviewers love the screen.'
        assert get_review_summary(product=chat_product) == 'Reviewers love the screen.'

        assert len(fake_assistant.summary_calls) == 1
        product_id, product_name, reviews = fake_assistant.summary_calls[0]
        assert product_name == 'Samsung Galaxy S24 Ultra'
        assert len(reviews) == 2

    def test_invalidate(self, chat_product, fake_assistant):
        get_review_summary(product=chat_product)
        invalidate_review_summary(product_id=chat_product.id)

        assert cache.get(SUMMARY_CACHE_KEY.format(product_id=chat_product.id)) is None
        get_review_summary(product=chat_product)
        assert len(fake_assistant.summary_calls) == 2

    def test_no_reviews(self, empty_product, fake_assistant):
        assert get_review_summary(product=empty_product) is None
        assert fake_assistant.summary_calls == []

    def test_failure_not_cached(self, chat_product, fake_assistant):
        fake_assistant.error = AssistantRequestError("AI assistant is unreachable")

        with pytest.raises(AssistantRequestError):
            get_review_summary(product=chat_product)

        assert cache.get(SUMMARY_CACHE_KEY.format(product_id=chat_product.id)) is None


@pytest.mark.django_db
class TestChatAboutProduct:
    """Test product Q&A."""

    def test_chat(self, chat_product, fake_assistant):
        answer = chat_about_product(product_id=chat_product.id, question='  Is the battery good? ')

        assert answer == 'Reviewers say the battery lasts a full day.'
        product_id, question, reviews = fake_assistant.chat_calls[0]
        assert product_id == chat_product.id
        assert question == 'Is the battery good?'
        assert len(reviews) == 2

    @pytest.mark.parametrize('question', [None, '', '   '])
    def test_blank_question(self, chat_product, fake_assistant, question):
        with pytest.raises(InvalidQuestionError):
            chat_about_product(product_id=chat_product.id, question=question)

        assert fake_assistant.chat_calls == []

    def test_unknown_product(self, fake_assistant, db):
        with pytest.raises(ProductNotFoundError):
            chat_about_product(product_id=999, question='Is it good?')

    def test_failure_propagates(self, chat_product, fake_assistant):
        fake_assistant.error = AssistantRequestError("AI assistant is unreachable")

        with pytest.raises(AssistantRequestError):
            chat_about_product(product_id=chat_product.id, question='Is it good?')
