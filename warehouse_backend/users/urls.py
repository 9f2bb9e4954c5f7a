# users/urls.py

from django.urls import path

from .views import LoginView, MeView, PasswordChangeView

urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    path("login", LoginView.as_view(), name="login"),
    # ---------------- AUTHENTICATED ----------------
    path("user/password", PasswordChangeView.as_view(), name="user-password"),
    path("user/me", MeView.as_view(), name="user-me"),
]
