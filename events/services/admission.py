# events/services/admission.py
"""
Booking admission and the operator-side booking mutations.

A submission is checked, in order, for:
1. event exists and is active      -> EventUnavailable
2. event is open for registration  -> RegistrationClosed
3. a seat is left                  -> EventFull
4. no booking for the national id  -> DuplicateRegistration

The event row is locked for the duration of the check and the insert,
so concurrent submissions to the same event are serialized on backends
that support SELECT ... FOR UPDATE. Duplicate identities are also
rejected by the (event, national_id) unique constraint.
"""
import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from core.errors import (
    DuplicateRegistration,
    EventFull,
    EventUnavailable,
    NotFound,
    RegistrationClosed,
    ValidationFailed,
)
from events.models import Event, EventBooking
from events.state_machine import apply_payment_status, initial_payment_state, is_payment_status

logger = logging.getLogger("eventreg.events")

# Distinguishes "notes not supplied" from "notes supplied as empty"
UNSET = object()


def seats_taken(event) -> int:
    return EventBooking.objects.filter(
        event=event,
        payment_status__in=EventBooking.SEAT_HOLDING_STATUSES,
    ).count()


def has_booking(event, national_id) -> bool:
    return EventBooking.objects.filter(event=event, national_id=national_id).exists()


def submit_booking(event_id, fields: dict) -> EventBooking:
    """
    Admit a registrant to an event.

    fields holds the registrant data (name, phone, email, national_id,
    academic_year, academic_division, notes).
    """
    with transaction.atomic():
        # Lock the event row so the seat count below stays valid until insert
        event = Event.objects.select_for_update().filter(pk=event_id).first()

        if event is None or not event.is_active:
            logger.warning(f"Booking rejected: event {event_id} unavailable")
            raise EventUnavailable()

        if not event.is_upcoming:
            logger.warning(f"Booking rejected: registration closed for event {event_id}")
            raise RegistrationClosed()

        if event.max_participants is not None:
            taken = seats_taken(event)
            if taken >= event.max_participants:
                logger.warning(
                    f"Booking rejected: event {event_id} is full "
                    f"({taken}/{event.max_participants})"
                )
                raise EventFull()

        if has_booking(event, fields["national_id"]):
            logger.warning(f"Booking rejected: duplicate national id for event {event_id}")
            raise DuplicateRegistration()

        try:
            with transaction.atomic():
                booking = EventBooking.objects.create(
                    event=event,
                    **fields,
                    **initial_payment_state(event),
                )
        except IntegrityError:
            # Lost a race with a concurrent submission for the same identity
            logger.warning(f"Booking rejected: unique constraint hit for event {event_id}")
            raise DuplicateRegistration()

    logger.info(
        f"Booking admitted: booking={booking.id}, event={event.id}, "
        f"status={booking.payment_status}"
    )
    return booking


def get_booking(booking_id) -> EventBooking:
    try:
        return EventBooking.objects.select_related("event").get(pk=booking_id)
    except EventBooking.DoesNotExist:
        raise NotFound("Booking not found")


def update_payment(booking_id, new_status, method=None, reference=None) -> EventBooking:
    """
    Set payment status, optionally overwriting method and reference.
    Marking paid stamps payment_date and confirms the booking in the same save.
    """
    if not is_payment_status(new_status):
        raise ValidationFailed("Invalid payment status")

    with transaction.atomic():
        try:
            booking = (
                EventBooking.objects.select_for_update()
                .select_related("event")
                .get(pk=booking_id)
            )
        except EventBooking.DoesNotExist:
            raise NotFound("Booking not found")

        old_status = booking.payment_status
        changed = apply_payment_status(booking, new_status, now=timezone.now())

        if method:
            booking.payment_method = method
            changed.append("payment_method")
        if reference:
            booking.payment_reference = reference
            changed.append("payment_reference")

        booking.save(update_fields=[*changed, "updated_at"])

    logger.info(f"Booking payment updated: booking={booking.id}, from={old_status}, to={new_status}")
    return booking


def update_notes(booking_id, notes=UNSET) -> EventBooking:
    """Replace notes only when the caller supplied them."""
    booking = get_booking(booking_id)

    if notes is not UNSET:
        booking.notes = notes
        booking.save(update_fields=["notes", "updated_at"])

    return booking


def remove_booking(booking_id) -> None:
    deleted, _ = EventBooking.objects.filter(pk=booking_id).delete()
    if not deleted:
        raise NotFound("Booking not found")
    logger.info(f"Booking deleted: booking={booking_id}")


def list_bookings(event_id=None, payment_status=None):
    """Newest first, optionally narrowed to one event and/or one payment status."""
    qs = EventBooking.objects.select_related("event")
    if event_id is not None:
        qs = qs.filter(event_id=event_id)
    if payment_status:
        qs = qs.filter(payment_status=payment_status)
    return qs.order_by("-created_at", "-id")


def list_for_event(event_id, payment_status=None):
    return list_bookings(event_id=event_id, payment_status=payment_status)
