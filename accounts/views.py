from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from core.responses import api_success
from .auth import authenticate_credentials, issue_session_token, register_account
from .passcodes import resend_code, verify_code
from .serializers import (
    AccountSerializer,
    LoginSerializer,
    ResendOtpSerializer,
    SignupSerializer,
    VerifyOtpSerializer,
)


class SignupView(APIView):
    # allow unauthenticated
    permission_classes = []
    authentication_classes = []

    def post(self, request):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = register_account(**serializer.validated_data)

        return api_success(
            msg="User created successfully. Please verify your email.",
            data=AccountSerializer(user).data,
            token=issue_session_token(user),
            status_code=status.HTTP_201_CREATED,
        )


class VerifyOtpView(APIView):
    permission_classes = []
    authentication_classes = []

    def post(self, request):
        serializer = VerifyOtpSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = verify_code(
            serializer.validated_data["email"],
            serializer.validated_data["otp"],
        )

        return api_success(
            msg="Email verified successfully",
            data=AccountSerializer(user).data,
            token=issue_session_token(user),
        )


class ResendOtpView(APIView):
    permission_classes = []
    authentication_classes = []

    def post(self, request):
        serializer = ResendOtpSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        resend_code(serializer.validated_data["email"])

        return api_success(msg="OTP sent successfully")


class LoginView(APIView):
    permission_classes = []
    authentication_classes = []

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate_credentials(
            serializer.validated_data["email"],
            serializer.validated_data["password"],
        )

        return api_success(
            msg="Login successful",
            data=AccountSerializer(user).data,
            token=issue_session_token(user),
        )


class CurrentUserView(APIView):
    """
    POST /users/currentUser
    Echo the caller's account and the token it authenticated with.
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        return api_success(
            data=AccountSerializer(request.user).data,
            token=getattr(request.auth, "token", None),
        )
