# accounts/passcodes.py
"""
One-time passcode (OTP) state machine for account onboarding.

States per account:

    unverified_no_code ──issue──▶ unverified_code_pending ──verify──▶ verified
                                   ▲            │
                                   └──resend────┘

- A code is a uniformly random 6 digit string in 100000..999999, valid
  for OTP_TTL_MINUTES (10 by default) from the moment it is issued.
- Verification needs an exact string match AND now < expiry.  An expired
  code stays expired; the only way forward is a resend.
- On success the account is marked verified and both passcode fields are
  cleared in the same save.  `verified` is terminal: the cleared code can
  never match a submitted string again.

Delivery of the code (email/SMS) is outside this service.
"""
from datetime import timedelta
import logging
import secrets

from django.conf import settings
from django.utils import timezone

from core.errors import AlreadyVerified, CodeExpired, InvalidCode, NotFound
from .models import User, normalize_email

logger = logging.getLogger("eventreg.accounts")

STATE_UNVERIFIED_NO_CODE = "unverified_no_code"
STATE_CODE_PENDING = "unverified_code_pending"
STATE_VERIFIED = "verified"

CODE_MIN = 100000
CODE_MAX = 999999


def generate_code() -> str:
    """Leading digit is never zero."""
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


def code_ttl() -> timedelta:
    return timedelta(minutes=settings.OTP_TTL_MINUTES)


def get_state(user: User) -> str:
    if user.is_verified:
        return STATE_VERIFIED
    if user.otp is None:
        return STATE_UNVERIFIED_NO_CODE
    return STATE_CODE_PENDING


def issue_code(user: User, now=None, save: bool = True) -> str:
    """
    Put a fresh code and expiry on the account.  Both fields are always
    written together; is_verified is never touched.
    """
    now = now or timezone.now()
    user.otp = generate_code()
    user.otp_expires = now + code_ttl()

    if save:
        user.save(update_fields=["otp", "otp_expires"])

    return user.otp


def _get_account(email) -> User:
    try:
        return User.objects.get(email=normalize_email(email))
    except User.DoesNotExist:
        raise NotFound("User not found")


def resend_code(email, now=None) -> User:
    """
    Replace the pending code (if any) with a new one.
    Only unverified accounts can be issued another code.
    """
    user = _get_account(email)

    if get_state(user) == STATE_VERIFIED:
        raise AlreadyVerified()

    issue_code(user, now=now)
    logger.info(f"Passcode reissued: user={user.id}")
    return user


def verify_code(email, code, now=None) -> User:
    """
    Consume a passcode.

    Raises NotFound (no account), InvalidCode (no exact match) or
    CodeExpired (now >= expiry).  Returns the verified account.
    """
    now = now or timezone.now()
    user = _get_account(email)

    if user.otp is None or user.otp != code:
        logger.warning(f"Passcode mismatch: user={user.id}")
        raise InvalidCode()

    if now >= user.otp_expires:
        logger.warning(f"Expired passcode submitted: user={user.id}")
        raise CodeExpired()

    user.is_verified = True
    user.otp = None
    user.otp_expires = None
    user.save(update_fields=["is_verified", "otp", "otp_expires"])

    logger.info(f"Account verified: user={user.id}")
    return user
