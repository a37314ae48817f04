from django.conf import settings
from drf_spectacular.utils import inline_serializer
from rest_framework import serializers


class PageQuerySerializer(serializers.Serializer):
    """Zero-based paging and 'field,direction' sorting query parameters."""

    page = serializers.IntegerField(min_value=0, default=0)
    size = serializers.IntegerField(min_value=1, required=False)
    sort = serializers.CharField(required=False, allow_blank=True)

    def validate_size(self, value):
        if value > settings.MAX_PAGE_SIZE:
            raise serializers.ValidationError(f"Ensure this value is less than or equal to {settings.MAX_PAGE_SIZE}.")
        return value

    def validate(self, attrs):
        attrs.setdefault('size', settings.DEFAULT_PAGE_SIZE)
        return attrs


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def page_schema(name: str, item_serializer):
    """OpenAPI shape of PageResult.to_response() for item_serializer."""
    return inline_serializer(
        name=name,
        fields={
            'content': item_serializer(many=True),
            'totalElements': serializers.IntegerField(),
            'totalPages': serializers.IntegerField(),
            'number': serializers.IntegerField(),
            'size': serializers.IntegerField(),
            'first': serializers.BooleanField(),
            'last': serializers.BooleanField(),
        },
    )
