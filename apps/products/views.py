from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.core.exceptions import QueryParameterError
from apps.core.serializers import ErrorResponseSerializer, page_schema
from .serializers import (
    ProductSerializer,
    ProductDetailSerializer,
    ProductFilterQuerySerializer,
    ProductListQuerySerializer,
    GlobalStatsSerializer,
)
from .services import (
    list_products,
    get_product_detail,
    get_global_stats,
    ProductNotFoundError,
)


FILTER_PARAMETERS = [
    OpenApiParameter('category', OpenApiTypes.STR, description="Exact category label, 'All' for every category"),
    OpenApiParameter('search', OpenApiTypes.STR, description='Case-insensitive substring of the product name'),
]

PAGE_PARAMETERS = [
    OpenApiParameter('page', OpenApiTypes.INT, description='Zero-based page index', default=0),
    OpenApiParameter('size', OpenApiTypes.INT, description='Page size', default=10),
    OpenApiParameter(
        'sort', OpenApiTypes.STR,
        description='field,direction. Fields: id, name, price, averageRating, reviewCount, createdAt',
        default='name,asc',
    ),
]


@extend_schema(
    parameters=FILTER_PARAMETERS + PAGE_PARAMETERS,
    responses={
        200: page_schema('ProductPage', ProductSerializer),
        400: ErrorResponseSerializer,
    },
    description="List products, filtered by category and name search, one page at a time.",
    tags=['products'],
)
@api_view(['GET'])
def product_list(request):
    """List products using service layer."""
    query = ProductListQuerySerializer(data=request.query_params)
    if not query.is_valid():
        return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        page = list_products(**query.validated_data)
    except QueryParameterError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(page.to_response(ProductSerializer))


@extend_schema(
    parameters=FILTER_PARAMETERS,
    responses={200: GlobalStatsSerializer},
    description="Totals for the hero section: matching products, their reviews and the mean rating.",
    tags=['products'],
)
@api_view(['GET'])
def product_stats(request):
    query = ProductFilterQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    stats = get_global_stats(**query.validated_data)
    return Response(GlobalStatsSerializer(stats).data)


@extend_schema(
    responses={
        200: ProductDetailSerializer,
        404: ErrorResponseSerializer,
    },
    description="Product detail with rating breakdown and AI review summary (null when unavailable).",
    tags=['products'],
)
@api_view(['GET'])
def product_detail(request, product_id):
    """Get product detail using service layer."""
    try:
        detail = get_product_detail(product_id=product_id)
    except ProductNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    serializer = ProductDetailSerializer(detail.product, context={'detail': detail})
    return Response(serializer.data)
