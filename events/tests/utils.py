from datetime import timedelta
from decimal import Decimal
from itertools import count

from django.utils import timezone
from rest_framework.test import APIClient

from accounts.auth import issue_session_token
from accounts.models import User
from events.models import Event

_seq = count(1)


def make_user(role=User.ROLE_USER, email=None):
    n = next(_seq)
    return User.objects.create_user(
        email=email or f"{role}{n}@example.com",
        password="secret1",
        name=f"{role.title()} {n}",
        role=role,
        is_verified=True,
    )


def make_event(owner=None, **overrides):
    fields = {
        "title": "Robotics Workshop",
        "main_title": "Build your first robot",
        "description": "Hands-on session",
        "date": "12 March",
        "event_date": timezone.now() + timedelta(days=7),
        "registration_fee": Decimal("0"),
        "created_by": owner,
    }
    fields.update(overrides)
    return Event.objects.create(**fields)


def booking_fields(national_id="29901011234567", **overrides):
    fields = {
        "name": "Mona Adel",
        "phone": "01000000000",
        "email": "mona@example.com",
        "national_id": national_id,
        "academic_year": "Third",
        "academic_division": "Electrical",
        "notes": "",
    }
    fields.update(overrides)
    return fields


def booking_payload(event, national_id="29901011234567", **overrides):
    payload = {
        "eventId": event.id,
        "name": "Mona Adel",
        "phone": "01000000000",
        "email": "mona@example.com",
        "nationalId": national_id,
        "academicYear": "Third",
        "academicDivision": "Electrical",
    }
    payload.update(overrides)
    return payload


def client_for(user=None):
    """APIClient carrying a real session token for user (anonymous if None)."""
    client = APIClient()
    if user is not None:
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_session_token(user)}")
    return client
