from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer

from apps.core.identity import require_user_id, user_id_parameter
from apps.core.serializers import ErrorResponseSerializer
from .exceptions import InvalidNotificationError
from .serializers import (
    NotificationSerializer,
    NotificationCreateSerializer,
    UnreadCountSerializer,
)
from .services import (
    create_notification,
    get_notifications,
    get_unread_count,
    mark_as_read,
    mark_all_as_read,
    delete_notification,
    delete_all_notifications,
)


@extend_schema(
    methods=['GET'],
    parameters=[user_id_parameter(required=True)],
    responses={200: NotificationSerializer(many=True), 400: ErrorResponseSerializer},
    description="The caller's notifications, newest first.",
    tags=['notifications'],
)
@extend_schema(
    methods=['POST'],
    parameters=[user_id_parameter(required=True)],
    request=NotificationCreateSerializer,
    responses={201: NotificationSerializer, 400: ErrorResponseSerializer},
    description="Add an unread notification to the caller's inbox.",
    tags=['notifications'],
)
@extend_schema(
    methods=['DELETE'],
    parameters=[user_id_parameter(required=True)],
    responses={
        200: inline_serializer('NotificationsDeleted', {'deleted': drf_serializers.IntegerField()}),
        400: ErrorResponseSerializer,
    },
    description="Delete all of the caller's notifications.",
    tags=['notifications'],
)
@api_view(['GET', 'POST', 'DELETE'])
def notifications(request):
    """List, create or clear the caller's notifications using service layer."""
    user_id = require_user_id(request)

    if request.method == 'POST':
        serializer = NotificationCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            notification = create_notification(
                user_id=user_id,
                title=serializer.validated_data['title'],
                message=serializer.validated_data['message'],
                product_id=serializer.validated_data.get('productId'),
            )
        except InvalidNotificationError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(NotificationSerializer(notification).data, status=status.HTTP_201_CREATED)

    if request.method == 'DELETE':
        deleted = delete_all_notifications(user_id=user_id)
        return Response({'deleted': deleted})

    serializer = NotificationSerializer(get_notifications(user_id=user_id), many=True)
    return Response(serializer.data)


@extend_schema(
    parameters=[user_id_parameter(required=True)],
    responses={200: UnreadCountSerializer, 400: ErrorResponseSerializer},
    description="Number of unread notifications, for the header badge.",
    tags=['notifications'],
)
@api_view(['GET'])
def unread_count(request):
    user_id = require_user_id(request)
    return Response(UnreadCountSerializer({'count': get_unread_count(user_id=user_id)}).data)


@extend_schema(
    request=None,
    parameters=[user_id_parameter(required=True)],
    responses={
        200: inline_serializer('NotificationsMarkedRead', {'updated': drf_serializers.IntegerField()}),
        400: ErrorResponseSerializer,
    },
    description="Mark all of the caller's notifications read.",
    tags=['notifications'],
)
@api_view(['PUT'])
def mark_all_read(request):
    user_id = require_user_id(request)
    return Response({'updated': mark_all_as_read(user_id=user_id)})


@extend_schema(
    request=None,
    responses={204: None},
    description="Mark one notification read. Missing or already read notifications are left as they are.",
    tags=['notifications'],
)
@api_view(['PUT'])
def mark_read(request, notification_id):
    mark_as_read(notification_id=notification_id)
    return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    responses={204: None},
    description="Delete one notification. Deleting a missing notification also succeeds.",
    tags=['notifications'],
)
@api_view(['DELETE'])
def remove_notification(request, notification_id):
    delete_notification(notification_id=notification_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
