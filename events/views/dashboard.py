"""
Operator dashboard endpoints.

Event mutations here answer with the whole refreshed dashboard listing
so the admin UI can redraw its table from a single response.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from core.permissions import ADMINS, OPERATORS, RoleGatedMixin, require_roles
from core.responses import api_success
from events.serializers import (
    BookingListSerializer,
    BookingSerializer,
    DashboardEventSerializer,
    EventInputSerializer,
    PaymentUpdateSerializer,
)
from events.services import admission, catalog
from .generics import booking_filters


def _dashboard_listing(msg=None, status_code=status.HTTP_200_OK):
    events = catalog.list_dashboard_events()
    return api_success(
        msg=msg,
        data=DashboardEventSerializer(events, many=True).data,
        status_code=status_code,
    )


class OperatorView(APIView):
    permission_classes = [IsAuthenticated, require_roles(*OPERATORS)]


class AdminView(APIView):
    permission_classes = [IsAuthenticated, require_roles(*ADMINS)]


class DashboardEventListView(OperatorView):
    """GET /dashboard/events: every event, retired included, with its owner."""

    def get(self, request):
        return _dashboard_listing()


class DashboardEventCreateView(OperatorView):
    def post(self, request):
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        catalog.create_event(serializer.validated_data, owner=request.user)

        return _dashboard_listing("Event created successfully", status.HTTP_201_CREATED)


class DashboardEventUpdateView(OperatorView):
    def patch(self, request, event_id):
        serializer = EventInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        catalog.update_event(event_id, serializer.validated_data, actor=request.user)

        return _dashboard_listing("Event updated successfully")


class DashboardEventDeleteView(AdminView):
    def delete(self, request, event_id):
        catalog.retire_event(event_id, actor=request.user)
        return _dashboard_listing("Event deleted successfully")


class DashboardBookingListView(OperatorView):
    """GET /dashboard/bookings?eventId=&paymentStatus="""

    def get(self, request):
        bookings = admission.list_bookings(**booking_filters(request))
        return api_success(data=BookingListSerializer(bookings, many=True).data)


class DashboardBookingView(RoleGatedMixin, APIView):
    """
    The same path carries two different ids:

    GET    /dashboard/bookings/<pk>   bookings of event <pk> (admin, editor)
    DELETE /dashboard/bookings/<pk>   delete booking <pk> (admin)
    """
    method_roles = {"GET": OPERATORS, "DELETE": ADMINS}

    def get(self, request, pk):
        filters = booking_filters(request)
        filters.pop("event_id", None)

        bookings = admission.list_for_event(pk, **filters)
        return api_success(data=BookingListSerializer(bookings, many=True).data)

    def delete(self, request, pk):
        admission.remove_booking(pk)
        return api_success(msg="Booking deleted successfully")


class DashboardBookingPaymentView(OperatorView):
    def patch(self, request, booking_id):
        serializer = PaymentUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        booking = admission.update_payment(
            booking_id,
            data["payment_status"],
            method=data.get("payment_method"),
            reference=data.get("payment_reference"),
        )

        return api_success(msg="Booking payment status updated", data=BookingSerializer(booking).data)
