from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from core.permissions import ADMINS, OPERATORS, RoleGatedMixin, require_roles
from core.responses import api_success
from events.serializers import BookingListSerializer, EventInputSerializer, EventSerializer
from events.services import admission, catalog
from .generics import booking_filters


def _public_listing(request):
    events = catalog.list_public_events(request.query_params.get("type"))
    return api_success(data=EventSerializer(events, many=True).data)


class PublicEventListView(APIView):
    """
    GET /events, GET /users/events
    Active events, newest first. ?type=upcoming|past
    """
    permission_classes = []
    authentication_classes = []

    def get(self, request):
        return _public_listing(request)


class EventListCreateView(RoleGatedMixin, APIView):
    """
    GET  /events   public listing
    POST /events   create (admin, editor)
    """
    method_roles = {"POST": OPERATORS}

    def get(self, request):
        return _public_listing(request)

    def post(self, request):
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        event = catalog.create_event(serializer.validated_data, owner=request.user)

        return api_success(
            msg="Event created successfully",
            data=EventSerializer(event).data,
            status_code=status.HTTP_201_CREATED,
        )


class EventDetailView(RoleGatedMixin, APIView):
    """
    GET    /events/<id>   public, retired events included
    PATCH  /events/<id>   admin, editor
    DELETE /events/<id>   admin (retires the event)
    """
    method_roles = {"PATCH": OPERATORS, "DELETE": ADMINS}

    def get(self, request, event_id):
        event = catalog.get_event(event_id)
        return api_success(data=EventSerializer(event).data)

    def patch(self, request, event_id):
        serializer = EventInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        event = catalog.update_event(event_id, serializer.validated_data, actor=request.user)

        return api_success(msg="Event updated successfully", data=EventSerializer(event).data)

    def delete(self, request, event_id):
        catalog.retire_event(event_id, actor=request.user)
        return api_success(msg="Event deleted successfully")


class EventBookingsView(APIView):
    """GET /events/<id>/bookings (admin, editor)"""
    permission_classes = [IsAuthenticated, require_roles(*OPERATORS)]

    def get(self, request, event_id):
        filters = booking_filters(request)
        filters.pop("event_id", None)

        bookings = admission.list_for_event(event_id, **filters)
        return api_success(data=BookingListSerializer(bookings, many=True).data)
