from .auth import LoginView, LogoutView
from .me import ChangePasswordView, MeView

__all__ = [
    "LoginView",
    "LogoutView",
    "MeView",
    "ChangePasswordView",
]
