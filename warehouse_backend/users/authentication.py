# users/authentication.py

"""
PATH: users/authentication.py

JWT AUTHENTICATION: header OR login cookie

Rules:
- An explicit `Authorization: Bearer <access>` header always wins.
- Otherwise the access token set by LoginView in settings.AUTH_COOKIE_NAME is used.
- No header and no cookie -> anonymous (IsAuthenticated then answers 401).
- A present but invalid/expired token -> 401 (never silently anonymous).
"""

from __future__ import annotations

from django.conf import settings
from rest_framework_simplejwt.authentication import JWTAuthentication


class CookieJWTAuthentication(JWTAuthentication):
    def authenticate(self, request):
        if self.get_header(request) is not None:
            return super().authenticate(request)

        raw_token = (request.COOKIES.get(settings.AUTH_COOKIE_NAME) or "").strip()
        if not raw_token:
            return None

        validated_token = self.get_validated_token(raw_token)
        return self.get_user(validated_token), validated_token
