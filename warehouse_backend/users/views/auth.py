# users/views/auth.py
"""
USER AUTH VIEWS

- POST  /api/login          -> JWT pair in the body + access token cookie
- PATCH /api/user/password  -> change own password (current password required)

Security hardening:
- Login is throttled separately from normal traffic (scope "login").
- Login failures never reveal whether the email exists.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from drf_spectacular.utils import extend_schema
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework_simplejwt.tokens import RefreshToken

from users.serializers import (
    LoginResponseSerializer,
    LoginSerializer,
    PasswordChangeSerializer,
    UserSerializer,
)

User = get_user_model()

logger = logging.getLogger(__name__)


# ---------------- THROTTLES (TARGETED) ----------------
class LoginAnonThrottle(AnonRateThrottle):
    """
    Anonymous login throttling.
    Uses REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']['login'].
    """
    scope = "login"


# ---------------- LOGIN (JWT + EMAIL) ----------------
class LoginView(generics.GenericAPIView):
    serializer_class = LoginSerializer
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [LoginAnonThrottle]

    @extend_schema(
        tags=["auth"],
        request=LoginSerializer,
        responses={200: LoginResponseSerializer},
        description="Authenticate with email + password and issue a session token",
    )
    def post(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data["email"]
        password = serializer.validated_data["password"]

        user = User.objects.filter(email__iexact=email).first()

        if user is None or not user.check_password(password):
            logger.info("Login rejected", extra={"email": email})
            return Response(
                {"detail": "Invalid email or password"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        if not user.is_active:
            return Response(
                {"detail": "User account is disabled"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        refresh = RefreshToken.for_user(user)
        access = str(refresh.access_token)

        response = Response(
            {
                "access": access,
                "refresh": str(refresh),
                "role": user.role,
                "user": UserSerializer(user).data,
            },
            status=status.HTTP_200_OK,
        )
        response.set_cookie(
            settings.AUTH_COOKIE_NAME,
            access,
            max_age=int(settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"].total_seconds()),
            httponly=True,
            secure=settings.AUTH_COOKIE_SECURE,
            samesite=settings.AUTH_COOKIE_SAMESITE,
        )
        return response


# ---------------- PASSWORD CHANGE ----------------
class PasswordChangeView(generics.GenericAPIView):
    serializer_class = PasswordChangeSerializer
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["auth"],
        request=PasswordChangeSerializer,
        responses={200: dict},
        description="Change the current user's password",
    )
    def patch(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = request.user
        if not user.check_password(serializer.validated_data["current_password"]):
            return Response(
                {"detail": "Current password is incorrect"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        user.set_password(serializer.validated_data["new_password"])
        user.save(update_fields=["password", "updated_at"])

        logger.info("Password changed", extra={"user_id": str(user.id)})

        return Response(
            {"detail": "Password changed successfully"},
            status=status.HTTP_200_OK,
        )
