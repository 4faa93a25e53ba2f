# accounts/authentication.py
# DRF authentication class that resolves session tokens to live accounts

import logging
import time

import jwt
from django.contrib.auth import get_user_model
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from core.errors import Unauthenticated

logger = logging.getLogger("eventreg.accounts")

User = get_user_model()

ALTERNATE_TOKEN_HEADER = "X-Auth-Token"

# Frontends sometimes send these when their stored token is missing
PLACEHOLDER_TOKENS = {"undefined", "null"}


def _is_expired(raw_token) -> bool:
    """Peek at the exp claim of a token that already failed validation."""
    try:
        claims = jwt.decode(raw_token, options={"verify_signature": False})
    except jwt.InvalidTokenError:
        return False
    exp = claims.get("exp")
    return exp is not None and exp <= time.time()


def _usable(token):
    if not token:
        return None
    token = token.strip()
    if not token or token in PLACEHOLDER_TOKENS:
        return None
    return token


class SessionTokenAuthentication(JWTAuthentication):
    """
    Resolves a session token to an account.

    The token is looked up, in order, in:
    1. ``Authorization: Bearer <token>``
    2. ``Authorization: <token>`` (no scheme)
    3. ``X-Auth-Token: <token>``

    Signature and expiry are verified, then the account is re-read from the
    database so a deleted account fails even with a valid token.
    """

    def get_session_token(self, request):
        token = None

        auth_header = request.headers.get("Authorization")
        if auth_header:
            if auth_header.startswith("Bearer "):
                token = _usable(auth_header.split(" ", 1)[1])
            else:
                token = _usable(auth_header)

        if token is None:
            token = _usable(request.headers.get(ALTERNATE_TOKEN_HEADER))

        return token

    def authenticate(self, request):
        raw_token = self.get_session_token(request)
        if raw_token is None:
            return None  # Anonymous; guarded views deny with 401

        try:
            validated_token = AccessToken(raw_token)
        except TokenError as e:
            logger.debug(f"Rejected session token: {e}")
            if _is_expired(raw_token):
                raise Unauthenticated("Token has expired")
            raise Unauthenticated("Token is not valid")

        return self.resolve_account(validated_token), validated_token

    def resolve_account(self, validated_token):
        user_id = validated_token.get(api_settings.USER_ID_CLAIM)
        if user_id is None:
            raise Unauthenticated("Token is not valid")

        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            raise Unauthenticated("User not found")
