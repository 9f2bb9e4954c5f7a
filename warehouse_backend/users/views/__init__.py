from .auth import LoginView, PasswordChangeView
from .me import MeView

__all__ = [
    "LoginView",
    "PasswordChangeView",
    "MeView",
]
