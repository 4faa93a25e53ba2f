from django.urls import path
from .views import (
    DashboardEventListView,
    DashboardEventCreateView,
    DashboardEventUpdateView,
    DashboardEventDeleteView,
    DashboardBookingListView,
    DashboardBookingView,
    DashboardBookingPaymentView,
)

urlpatterns = [
    path("events", DashboardEventListView.as_view(), name="dashboard-events"),
    path("createEvent", DashboardEventCreateView.as_view(), name="dashboard-create-event"),
    path("updateEvent/<int:event_id>", DashboardEventUpdateView.as_view(), name="dashboard-update-event"),
    path("deleteEvent/<int:event_id>", DashboardEventDeleteView.as_view(), name="dashboard-delete-event"),
    path("bookings", DashboardBookingListView.as_view(), name="dashboard-bookings"),
    path("bookings/<int:pk>", DashboardBookingView.as_view(), name="dashboard-booking"),
    path("bookings/<int:booking_id>/payment", DashboardBookingPaymentView.as_view(), name="dashboard-booking-payment"),
]
