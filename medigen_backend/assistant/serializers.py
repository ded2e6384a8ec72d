# assistant/serializers.py

from rest_framework import serializers


class AskInputSerializer(serializers.Serializer):
    message = serializers.CharField(max_length=2000, trim_whitespace=True)


class AskResponseSerializer(serializers.Serializer):
    reply = serializers.CharField()
