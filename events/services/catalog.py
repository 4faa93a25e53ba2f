# events/services/catalog.py
"""
Event catalog: creation, patching, retirement and the two listings.

Public listings only ever contain active events. The dashboard listing
shows every event with its owner.
"""
import logging

from django.db import transaction

from core.errors import NotFound
from events.models import Event
from events.state_machine import set_status

logger = logging.getLogger("eventreg.events")

LISTING_UPCOMING = "upcoming"
LISTING_PAST = "past"

# Fields an operator may change through a patch. Identity and owner are not here.
PATCHABLE_FIELDS = frozenset({
    "title",
    "main_title",
    "description",
    "date",
    "event_date",
    "location",
    "image",
    "link",
    "max_participants",
    "registration_fee",
    "is_upcoming",
    "status",
})


def get_event(event_id) -> Event:
    """Any event by id, retired ones included."""
    try:
        return Event.objects.get(pk=event_id)
    except Event.DoesNotExist:
        raise NotFound("Event not found")


def create_event(fields: dict, owner) -> Event:
    event = Event.objects.create(created_by=owner, **fields)
    logger.info(f"Event created: event={event.id}, actor={getattr(owner, 'id', 'unknown')}")
    return event


def update_event(event_id, changes: dict, actor=None) -> Event:
    """
    Shallow-merge allow-listed fields onto the stored event.
    Keys outside PATCHABLE_FIELDS are ignored.
    """
    changes = {k: v for k, v in changes.items() if k in PATCHABLE_FIELDS}
    new_status = changes.pop("status", None)

    with transaction.atomic():
        event = get_event(event_id)

        for field, value in changes.items():
            setattr(event, field, value)

        if new_status is not None:
            if set_status(event, new_status, actor=actor, save=False):
                changes["status"] = new_status

        if changes:
            event.save(update_fields=[*changes, "updated_at"])

    logger.info(
        f"Event updated: event={event.id}, fields={sorted(changes)}, "
        f"actor={getattr(actor, 'id', 'unknown')}"
    )
    return event


def retire_event(event_id, actor=None) -> Event:
    """Soft delete. Bookings are left untouched."""
    event = get_event(event_id)
    set_status(event, Event.STATUS_RETIRED, actor=actor)
    return event


def list_public_events(kind=None):
    """
    Active events, newest event_date first.

    kind: "upcoming" or "past" filter on the is_upcoming flag; anything
    else lists every active event.
    """
    qs = Event.objects.active()
    if kind == LISTING_UPCOMING:
        qs = qs.filter(is_upcoming=True)
    elif kind == LISTING_PAST:
        qs = qs.filter(is_upcoming=False)
    return qs.order_by("-event_date", "-id")


def list_dashboard_events():
    return Event.objects.select_related("created_by").order_by("-created_at", "-id")
