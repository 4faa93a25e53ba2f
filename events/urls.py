from django.urls import path
from .views import (
    EventListCreateView,
    EventDetailView,
    EventBookingsView,
    BookingListCreateView,
    BookingDetailView,
    BookingPaymentView,
    BookingNotesView,
)

urlpatterns = [
    # Events
    path("events", EventListCreateView.as_view(), name="event-list"),
    path("events/<int:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<int:event_id>/bookings", EventBookingsView.as_view(), name="event-bookings"),

    # Bookings
    path("bookings", BookingListCreateView.as_view(), name="booking-list"),
    path("bookings/<int:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path("bookings/<int:booking_id>/payment", BookingPaymentView.as_view(), name="booking-payment"),
    path("bookings/<int:booking_id>/notes", BookingNotesView.as_view(), name="booking-notes"),
]
