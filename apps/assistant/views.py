import logging

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.serializers import ErrorResponseSerializer
from .exceptions import (
    InvalidQuestionError,
    ProductNotFoundError,
    AssistantNotConfiguredError,
    AssistantUnavailableError,
)
from .serializers import ChatRequestSerializer, ChatResponseSerializer
from .services import chat_about_product

logger = logging.getLogger(__name__)


@extend_schema(
    request=ChatRequestSerializer,
    responses={
        200: ChatResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        502: ErrorResponseSerializer,
        503: ErrorResponseSerializer,
    },
    description="Ask the review assistant a question about a product. Answers are grounded in its reviews.",
    tags=['assistant'],
)
@api_view(['POST'])
def product_chat(request, product_id):
    """Answer a shopper question using service layer."""
    serializer = ChatRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        answer = chat_about_product(
            product_id=product_id,
            question=serializer.validated_data.get('question'),
        )
    except InvalidQuestionError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except ProductNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except AssistantNotConfiguredError as e:
        return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
    except AssistantUnavailableError as e:
        logger.error("Chat failed for product %s: %s", product_id, e)
        return Response({'error': str(e)}, status=status.HTTP_502_BAD_GATEWAY)

    return Response({'answer': answer})
