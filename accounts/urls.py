# accounts/urls.py
from django.urls import path

from events.views import PublicEventListView
from .views import (
    SignupView,
    VerifyOtpView,
    ResendOtpView,
    LoginView,
    CurrentUserView,
)

urlpatterns = [
    path("signup", SignupView.as_view(), name="signup"),
    path("verify", VerifyOtpView.as_view(), name="verify-otp"),
    path("resend-otp", ResendOtpView.as_view(), name="resend-otp"),
    path("login", LoginView.as_view(), name="login"),
    path("currentUser", CurrentUserView.as_view(), name="current-user"),
    path("events", PublicEventListView.as_view(), name="user-events"),
]
