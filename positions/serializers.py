from rest_framework import serializers


class PositionSerializer(serializers.Serializer):
    """Serializer for hotel positions"""
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    category = serializers.CharField(read_only=True)
