# users/views/auth.py

from django.contrib.auth import authenticate
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from activity.services import client_ip
from backend.throttling import PublicWriteThrottle
from users.models import User
from users.serializers import (
    AuthResponseSerializer,
    LoginSerializer,
    RegisterSerializer,
    UserSerializer,
)
from users.services import on_logged_in, on_registered


def _auth_payload(user) -> dict:
    refresh = RefreshToken.for_user(user)
    return {
        "user": UserSerializer(user).data,
        "access": str(refresh.access_token),
        "refresh": str(refresh),
    }


class RegisterView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicWriteThrottle]
    serializer_class = RegisterSerializer

    @extend_schema(
        tags=["Auth"],
        request=RegisterSerializer,
        responses={
            201: AuthResponseSerializer,
            400: OpenApiResponse(description="Validation error / user exists"),
        },
        description="Register a shopper account (role is always 'user').",
    )
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        user = User.objects.create_user(
            email=data["email"],
            password=data["password"],
            name=data["name"].strip(),
            phone=data["phone"].strip(),
        )

        on_registered(user, ip_address=client_ip(request))

        return Response(_auth_payload(user), status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicWriteThrottle]
    serializer_class = LoginSerializer

    @extend_schema(
        tags=["Auth"],
        request=LoginSerializer,
        responses={
            200: AuthResponseSerializer,
            401: OpenApiResponse(description="Invalid credentials"),
        },
        description="Authenticate with email + password; returns JWT pair.",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request=request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )

        if not user:
            return Response(
                {"detail": "Invalid credentials."},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        on_logged_in(user, ip_address=client_ip(request))

        return Response(_auth_payload(user), status=status.HTTP_200_OK)
