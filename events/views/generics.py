from core.errors import ValidationFailed


def booking_filters(request) -> dict:
    """
    Read the optional eventId / paymentStatus filters of a booking listing.
    Returns kwargs for admission.list_bookings.
    """
    filters = {}

    event_id = request.query_params.get("eventId")
    if event_id:
        try:
            filters["event_id"] = int(event_id)
        except ValueError:
            raise ValidationFailed("Invalid event ID")

    payment_status = request.query_params.get("paymentStatus")
    if payment_status:
        filters["payment_status"] = payment_status

    return filters
