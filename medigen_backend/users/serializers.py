# users/serializers.py

from __future__ import annotations

from rest_framework import serializers

from users.models import User
from users.services import is_reserved_email, is_strong_password


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=20)
    password = serializers.CharField(write_only=True)

    def validate_email(self, value):
        value = value.strip().lower()
        if is_reserved_email(value):
            raise serializers.ValidationError("Restricted email address.")
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("User already exists.")
        return value

    def validate_password(self, value):
        if not is_strong_password(value):
            raise serializers.ValidationError(
                "Weak password. Use 8+ characters with upper, lower, digit and special character."
            )
        return value


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "email", "name", "phone", "role", "created_at"]
        read_only_fields = fields


class AuthResponseSerializer(serializers.Serializer):
    user = UserSerializer()
    access = serializers.CharField()
    refresh = serializers.CharField()
