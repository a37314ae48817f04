from rest_framework import serializers


class ChatRequestSerializer(serializers.Serializer):
    question = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ChatResponseSerializer(serializers.Serializer):
    answer = serializers.CharField()
