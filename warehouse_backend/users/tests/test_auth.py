# users/tests/test_auth.py

from __future__ import annotations

import os
from io import StringIO
from unittest import mock

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

User = get_user_model()


class LoginTests(TestCase):
    """
    GUARANTEES:
    - Valid credentials return a token pair and set the login cookie
    - Bad credentials never reveal whether the email exists
    - The cookie alone authenticates later requests
    """

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(
            email="staff@example.com",
            password="secret123",
            name="Sam Staff",
        )
        self.url = reverse("login")

    def test_login_returns_tokens_and_sets_cookie(self):
        response = self.client.post(
            self.url, {"email": "staff@example.com", "password": "secret123"}
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("access", response.data)
        self.assertIn("refresh", response.data)
        self.assertEqual(response.data["role"], User.ROLE_STAFF)
        self.assertEqual(response.data["user"]["email"], "staff@example.com")

        cookie = response.cookies.get(settings.AUTH_COOKIE_NAME)
        self.assertIsNotNone(cookie)
        self.assertEqual(cookie.value, response.data["access"])
        self.assertTrue(cookie["httponly"])

    def test_login_email_is_case_insensitive(self):
        response = self.client.post(
            self.url, {"email": "STAFF@example.com", "password": "secret123"}
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_wrong_password_is_rejected(self):
        response = self.client.post(
            self.url, {"email": "staff@example.com", "password": "nope-nope"}
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "Invalid email or password")

    def test_unknown_email_gets_same_message(self):
        response = self.client.post(
            self.url, {"email": "ghost@example.com", "password": "secret123"}
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "Invalid email or password")

    def test_inactive_user_cannot_login(self):
        self.user.is_active = False
        self.user.save()

        response = self.client.post(
            self.url, {"email": "staff@example.com", "password": "secret123"}
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_missing_fields_are_rejected(self):
        response = self.client.post(self.url, {"email": "staff@example.com"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_cookie_authenticates_me_endpoint(self):
        login = self.client.post(
            self.url, {"email": "staff@example.com", "password": "secret123"}
        )
        self.assertEqual(login.status_code, status.HTTP_200_OK)

        # APIClient keeps cookies from the login response.
        response = self.client.get(reverse("user-me"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["email"], "staff@example.com")

    def test_bearer_header_authenticates(self):
        login = self.client.post(
            self.url, {"email": "staff@example.com", "password": "secret123"}
        )
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")

        response = client.get(reverse("user-me"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_garbage_cookie_is_unauthorized(self):
        client = APIClient()
        client.cookies[settings.AUTH_COOKIE_NAME] = "not-a-token"

        response = client.get(reverse("user-me"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_anonymous_is_unauthorized(self):
        response = APIClient().get(reverse("user-me"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class PasswordChangeTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="manager@example.com", password="oldpass1")
        self.url = reverse("user-password")

    def test_password_change_succeeds(self):
        self.client.force_authenticate(self.user)

        response = self.client.patch(
            self.url, {"current_password": "oldpass1", "new_password": "newpass2"}
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("newpass2"))

    def test_wrong_current_password_is_rejected(self):
        self.client.force_authenticate(self.user)

        response = self.client.patch(
            self.url, {"current_password": "wrong", "new_password": "newpass2"}
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "Current password is incorrect")
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("oldpass1"))

    def test_short_new_password_is_rejected(self):
        self.client.force_authenticate(self.user)

        response = self.client.patch(
            self.url, {"current_password": "oldpass1", "new_password": "abc"}
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("new_password", response.data)

    def test_anonymous_cannot_change_password(self):
        response = self.client.patch(
            self.url, {"current_password": "oldpass1", "new_password": "newpass2"}
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class EnsureManagerCommandTests(TestCase):
    def test_creates_manager_once(self):
        env = {"AUTO_MANAGER_EMAIL": "boss@example.com", "AUTO_MANAGER_PASSWORD": "StrongPass1"}

        with mock.patch.dict(os.environ, env):
            call_command("ensure_manager", stdout=StringIO())
            call_command("ensure_manager", stdout=StringIO())

        users = User.objects.filter(email="boss@example.com")
        self.assertEqual(users.count(), 1)
        manager = users.get()
        self.assertTrue(manager.is_manager)
        self.assertTrue(manager.is_superuser)
        self.assertTrue(manager.check_password("StrongPass1"))
