# accounts/auth.py
"""
Credential checks and session token issuance.

Session tokens are stateless signed JWTs (simplejwt AccessToken) carrying
the account id in the ``id`` claim and a fixed lifetime
(SESSION_TOKEN_DAYS, 30 by default).  They cannot be revoked server-side
before they expire; rotating JWT_SECRET invalidates every outstanding
session at once.
"""
import logging

from django.db import IntegrityError, transaction
from rest_framework_simplejwt.tokens import AccessToken

from core.errors import AccountExists, InvalidCredentials
from .models import User, normalize_email
from .passcodes import issue_code

logger = logging.getLogger("eventreg.accounts")


def issue_session_token(user: User) -> str:
    return str(AccessToken.for_user(user))


def register_account(name: str, email: str, password: str) -> User:
    """
    Create an unverified account with a pending passcode.
    Raises AccountExists if the (normalized) email is taken.
    """
    email = normalize_email(email)

    if User.objects.filter(email=email).exists():
        raise AccountExists()

    user = User(email=email, name=name)
    user.set_password(password)
    issue_code(user, save=False)

    try:
        with transaction.atomic():
            user.save()
    except IntegrityError:
        # Lost a race against a concurrent signup for the same email
        raise AccountExists()

    logger.info(f"Account created: user={user.id}")
    return user


def authenticate_credentials(email: str, password: str) -> User:
    """
    Look the account up by email and check the password.

    Password hashes are compared in constant time by Django's hashers.
    A dummy hash is computed for unknown emails so both failure paths
    cost roughly the same.
    """
    try:
        user = User.objects.get(email=normalize_email(email))
    except User.DoesNotExist:
        User().set_password(password)
        logger.warning("Login failed: unknown email")
        raise InvalidCredentials()

    if not user.check_password(password):
        logger.warning(f"Login failed: bad password for user={user.id}")
        raise InvalidCredentials()

    return user
