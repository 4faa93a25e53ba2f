# events/state_machine.py
"""
Status rules for events and bookings.

Events move between two states:
active ⇄ retired

Retiring replaces deletion; a retired event is hidden from the public
listing but stays addressable by id and keeps its bookings.

Booking payment status may be set to any known value by an operator.
Marking a booking paid confirms it and stamps the payment time.
"""
import logging

from django.utils import timezone

from core.errors import ValidationFailed
from .models import Event, EventBooking

logger = logging.getLogger('eventreg.events')


NEXT_STATUSES = {
    Event.STATUS_ACTIVE: {Event.STATUS_RETIRED},
    Event.STATUS_RETIRED: {Event.STATUS_ACTIVE},
}


def set_status(event: Event, new_status: str, actor=None, save: bool = True) -> bool:
    """
    Move event to new_status. Setting the current status is a no-op.

    Returns True when the status changed; raises ValidationFailed for a
    status the event cannot move to.
    """
    if new_status == event.status:
        return False

    if new_status not in NEXT_STATUSES.get(event.status, ()):
        logger.warning(
            f"Rejected event status change: event={event.id}, "
            f"from={event.status}, to={new_status}, actor={getattr(actor, 'id', 'unknown')}"
        )
        raise ValidationFailed(f"Cannot move event from '{event.status}' to '{new_status}'")

    old_status = event.status
    event.status = new_status

    if save:
        event.save(update_fields=['status', 'updated_at'])

    logger.info(
        f"Event status changed: event={event.id}, "
        f"from={old_status}, to={new_status}, actor={getattr(actor, 'id', 'unknown')}"
    )
    return True


def is_payment_status(value) -> bool:
    return value in dict(EventBooking.PAYMENT_CHOICES)


def initial_payment_state(event: Event, now=None) -> dict:
    """
    Payment fields for a new booking.

    Free events need no payment, so their bookings start out paid and
    confirmed. Paid events start pending with the fee as amount due.
    """
    if event.is_free:
        return {
            "payment_status": EventBooking.PAYMENT_PAID,
            "payment_amount": event.registration_fee,
            "payment_date": now or timezone.now(),
            "is_confirmed": True,
        }
    return {
        "payment_status": EventBooking.PAYMENT_PENDING,
        "payment_amount": event.registration_fee,
    }


def apply_payment_status(booking: EventBooking, new_status: str, now=None) -> list:
    """
    Set the payment status on booking in memory.

    Returns the list of fields that changed, for save(update_fields=...).
    """
    booking.payment_status = new_status
    changed = ['payment_status']

    if new_status == EventBooking.PAYMENT_PAID:
        booking.payment_date = now or timezone.now()
        booking.is_confirmed = True
        changed += ['payment_date', 'is_confirmed']

    return changed
