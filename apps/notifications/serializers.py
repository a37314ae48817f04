from rest_framework import serializers
from .models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    productId = serializers.IntegerField(source='product_id', read_only=True, allow_null=True)
    read = serializers.BooleanField(source='is_read', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Notification
        fields = ['id', 'title', 'message', 'productId', 'read', 'createdAt']
        read_only_fields = fields


class NotificationCreateSerializer(serializers.Serializer):
    """Body of POST /api/user/notifications/."""

    title = serializers.CharField(max_length=200)
    message = serializers.CharField()
    productId = serializers.IntegerField(required=False, allow_null=True)


class UnreadCountSerializer(serializers.Serializer):
    count = serializers.IntegerField()
