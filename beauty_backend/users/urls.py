# users/urls.py

from django.urls import path

from .views import ChangePasswordView, LoginView, LogoutView, MeView

app_name = "users"

urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    path("login/", LoginView.as_view(), name="login"),
    # ---------------- AUTHENTICATED ----------------
    path("logout/", LogoutView.as_view(), name="logout"),
    path("me/", MeView.as_view(), name="me"),
    path("password/", ChangePasswordView.as_view(), name="password"),
]
