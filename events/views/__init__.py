from .events import (
    PublicEventListView,
    EventListCreateView,
    EventDetailView,
    EventBookingsView,
)
from .bookings import (
    BookingListCreateView,
    BookingDetailView,
    BookingPaymentView,
    BookingNotesView,
)
from .dashboard import (
    DashboardEventListView,
    DashboardEventCreateView,
    DashboardEventUpdateView,
    DashboardEventDeleteView,
    DashboardBookingListView,
    DashboardBookingView,
    DashboardBookingPaymentView,
)
