"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class HotelSerializer(serializers.Serializer):
    """Serializer for Hotel domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    image = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class ErrorSerializer(serializers.Serializer):
    """Serializer for DomainError. Only the public code and message."""

    code = serializers.CharField(source="code.value")
    message = serializers.CharField()
