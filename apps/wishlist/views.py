from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.identity import require_user_id, user_id_parameter
from apps.core.serializers import ErrorResponseSerializer
from .exceptions import ProductNotFoundError
from .serializers import WishlistToggleSerializer
from .services import get_wishlist, toggle_wishlist


@extend_schema(
    parameters=[user_id_parameter(required=True)],
    responses={
        200: {'type': 'array', 'items': {'type': 'integer'}},
        400: ErrorResponseSerializer,
    },
    description="Product IDs on the caller's wishlist, oldest first.",
    tags=['wishlist'],
)
@api_view(['GET'])
def wishlist(request):
    user_id = require_user_id(request)
    return Response(get_wishlist(user_id=user_id))


@extend_schema(
    request=None,
    parameters=[user_id_parameter(required=True)],
    responses={
        200: WishlistToggleSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Add the product to the caller's wishlist, or remove it if it is already there.",
    tags=['wishlist'],
)
@api_view(['POST'])
def toggle_wishlist_item(request, product_id):
    """Toggle wishlist membership using service layer."""
    user_id = require_user_id(request)

    try:
        wishlisted = toggle_wishlist(user_id=user_id, product_id=product_id)
    except ProductNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    serializer = WishlistToggleSerializer({'productId': product_id, 'wishlisted': wishlisted})
    return Response(serializer.data)
