from rest_framework import serializers

from core.serializers import required_messages
from .models import User, normalize_email


class NormalizedEmailField(serializers.EmailField):
    def to_internal_value(self, data):
        return normalize_email(super().to_internal_value(data))


class SignupSerializer(serializers.Serializer):
    name = serializers.CharField(error_messages=required_messages("Name is required"))
    email = NormalizedEmailField(error_messages=required_messages("Valid email is required"))
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        min_length=6,
        error_messages=required_messages(
            "Password must be at least 6 characters",
            min_length="Password must be at least 6 characters",
        ),
    )


class VerifyOtpSerializer(serializers.Serializer):
    email = NormalizedEmailField(error_messages=required_messages("Valid email is required"))
    # Compared verbatim with the stored code
    otp = serializers.CharField(trim_whitespace=False, error_messages=required_messages("OTP is required"))


class ResendOtpSerializer(serializers.Serializer):
    email = NormalizedEmailField(error_messages=required_messages("Valid email is required"))


class LoginSerializer(serializers.Serializer):
    email = NormalizedEmailField(error_messages=required_messages("Valid email is required"))
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        error_messages=required_messages("Password is required"),
    )


class AccountSerializer(serializers.ModelSerializer):
    _id = serializers.IntegerField(source="id", read_only=True)
    isVerified = serializers.BooleanField(source="is_verified", read_only=True)
    createdAt = serializers.DateTimeField(source="date_joined", read_only=True)

    class Meta:
        model = User
        fields = [
            "_id",
            "name",
            "email",
            "role",
            "isVerified",
            "createdAt",
        ]
        read_only_fields = fields


class OwnerSerializer(serializers.ModelSerializer):
    """Owner reference as shown on dashboard event listings."""
    _id = serializers.IntegerField(source="id", read_only=True)

    class Meta:
        model = User
        fields = ["_id", "name", "email"]
        read_only_fields = fields
