from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from core.permissions import ADMINS, OPERATORS, RoleGatedMixin, require_roles
from core.responses import api_success
from events.serializers import (
    BookingCreateSerializer,
    BookingDetailSerializer,
    BookingListSerializer,
    BookingSerializer,
    NotesUpdateSerializer,
    PaymentUpdateSerializer,
)
from events.services import admission
from .generics import booking_filters


class BookingListCreateView(RoleGatedMixin, APIView):
    """
    POST /bookings   public registration form
    GET  /bookings   admin, editor. ?eventId=&paymentStatus=
    """
    method_roles = {"GET": OPERATORS}

    def get(self, request):
        bookings = admission.list_bookings(**booking_filters(request))
        return api_success(data=BookingListSerializer(bookings, many=True).data)

    def post(self, request):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        fields = dict(serializer.validated_data)
        event_id = fields.pop("event_id")
        booking = admission.submit_booking(event_id, fields)

        return api_success(
            msg="Event booking successful",
            data=BookingSerializer(booking).data,
            status_code=status.HTTP_201_CREATED,
        )


class BookingDetailView(RoleGatedMixin, APIView):
    """
    GET    /bookings/<id>   admin, editor (embeds the full event)
    DELETE /bookings/<id>   admin
    """
    method_roles = {"GET": OPERATORS, "DELETE": ADMINS}

    def get(self, request, booking_id):
        booking = admission.get_booking(booking_id)
        return api_success(data=BookingDetailSerializer(booking).data)

    def delete(self, request, booking_id):
        admission.remove_booking(booking_id)
        return api_success(msg="Booking deleted successfully")


class BookingPaymentView(APIView):
    """PATCH /bookings/<id>/payment (admin, editor)"""
    permission_classes = [IsAuthenticated, require_roles(*OPERATORS)]

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


class BookingNotesView(APIView):
    """PATCH /bookings/<id>/notes (admin, editor)"""
    permission_classes = [IsAuthenticated, require_roles(*OPERATORS)]

    def patch(self, request, booking_id):
        serializer = NotesUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        # Absent key leaves notes untouched; "" clears them
        if "notes" in serializer.validated_data:
            booking = admission.update_notes(booking_id, serializer.validated_data["notes"])
        else:
            booking = admission.update_notes(booking_id)

        return api_success(msg="Booking notes updated", data=BookingSerializer(booking).data)
