from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.core.exceptions import QueryParameterError
from apps.core.identity import get_user_id, require_user_id, user_id_parameter
from apps.core.serializers import ErrorResponseSerializer, page_schema
from .serializers import (
    ReviewSerializer,
    ReviewCreateSerializer,
    ReviewListQuerySerializer,
)
from .services import (
    add_review,
    list_reviews,
    toggle_helpful,
    get_user_voted_review_ids,
    ReviewNotFoundError,
    ProductNotFoundError,
    InvalidRatingError,
    InvalidReviewError,
    AnonymousVoteNotAllowedError,
)


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('rating', OpenApiTypes.INT, description='Only reviews with exactly this rating'),
        OpenApiParameter('page', OpenApiTypes.INT, description='Zero-based page index', default=0),
        OpenApiParameter('size', OpenApiTypes.INT, description='Page size', default=10),
        OpenApiParameter(
            'sort', OpenApiTypes.STR,
            description='field,direction. Fields: id, createdAt, rating, helpfulCount',
            default='createdAt,desc',
        ),
    ],
    responses={
        200: page_schema('ReviewPage', ReviewSerializer),
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="List a product's reviews, newest first by default.",
    tags=['reviews'],
)
@extend_schema(
    methods=['POST'],
    request=ReviewCreateSerializer,
    responses={
        201: ReviewSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Submit a review. Product rating statistics are updated in the same transaction.",
    tags=['reviews'],
)
@api_view(['GET', 'POST'])
def product_reviews(request, product_id):
    """List or submit product reviews using service layer."""
    if request.method == 'POST':
        serializer = ReviewCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            review = add_review(
                product_id=product_id,
                reviewer_name=serializer.validated_data['reviewerName'],
                comment=serializer.validated_data['comment'],
                rating=serializer.validated_data['rating'],
            )
        except ProductNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (InvalidRatingError, InvalidReviewError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    query = ReviewListQuerySerializer(data=request.query_params)
    if not query.is_valid():
        return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        page = list_reviews(product_id=product_id, **query.validated_data)
    except ProductNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except QueryParameterError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(page.to_response(ReviewSerializer))


@extend_schema(
    request=None,
    parameters=[user_id_parameter(required=False)],
    responses={
        200: ReviewSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description=(
        "Toggle the caller's helpful vote. With X-User-ID a second call undoes the first; "
        "anonymous calls only increment."
    ),
    tags=['reviews'],
)
@api_view(['PUT'])
def mark_review_helpful(request, review_id):
    """Toggle helpful vote using service layer."""
    user_id = get_user_id(request)

    try:
        review = toggle_helpful(review_id=review_id, user_id=user_id)
    except ReviewNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except AnonymousVoteNotAllowedError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(ReviewSerializer(review).data)


@extend_schema(
    parameters=[user_id_parameter(required=True)],
    responses={
        200: {'type': 'array', 'items': {'type': 'integer'}},
        400: ErrorResponseSerializer,
    },
    description="IDs of the reviews the caller has marked helpful.",
    tags=['reviews'],
)
@api_view(['GET'])
def voted_reviews(request):
    user_id = require_user_id(request)
    return Response(get_user_voted_review_ids(user_id=user_id))
