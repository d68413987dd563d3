"""Account sign-up and credential check endpoints."""

from django.urls import path

from ..views import auth

urlpatterns = [
    path("auth/signup", auth.SignupView.as_view(), name="auth_signup"),
    path("auth/login", auth.LoginView.as_view(), name="auth_login"),
]
