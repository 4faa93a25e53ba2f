from rest_framework import serializers

from accounts.serializers import NormalizedEmailField, OwnerSerializer
from core.serializers import required_messages
from .models import Event, EventBooking
from .sanitizers import sanitize_description, sanitize_line, sanitize_text


def _clean_line(value, message, max_length=None):
    value = sanitize_line(value, max_length=max_length)
    if not value:
        raise serializers.ValidationError(message)
    return value


# -----------------------------------------
# EVENTS
# -----------------------------------------
class EventSerializer(serializers.ModelSerializer):
    """Public shape of an event. The owner is never exposed here."""
    _id = serializers.IntegerField(source="id", read_only=True)
    mainTitle = serializers.CharField(source="main_title", read_only=True)
    eventDate = serializers.DateTimeField(source="event_date", read_only=True)
    locationEvent = serializers.CharField(source="location", read_only=True)
    maxParticipants = serializers.IntegerField(source="max_participants", read_only=True)
    registrationFee = serializers.DecimalField(
        source="registration_fee",
        max_digits=10,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
    )
    isUpcoming = serializers.BooleanField(source="is_upcoming", read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Event
        fields = [
            "_id",
            "title",
            "mainTitle",
            "description",
            "date",
            "eventDate",
            "locationEvent",
            "image",
            "link",
            "maxParticipants",
            "registrationFee",
            "isUpcoming",
            "isActive",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


class DashboardEventSerializer(EventSerializer):
    createdBy = OwnerSerializer(source="created_by", read_only=True)

    class Meta(EventSerializer.Meta):
        fields = EventSerializer.Meta.fields + ["createdBy"]
        read_only_fields = fields


class EventSummarySerializer(serializers.ModelSerializer):
    """Event reference embedded in booking listings."""
    _id = serializers.IntegerField(source="id", read_only=True)
    mainTitle = serializers.CharField(source="main_title", read_only=True)

    class Meta:
        model = Event
        fields = ["_id", "title", "mainTitle", "date"]
        read_only_fields = fields


class EventInputSerializer(serializers.Serializer):
    """
    Create and patch payload for events.

    Use with partial=True for patches: only supplied keys come back in
    validated_data. Keys not declared here (ids, owner) are dropped.
    Field order decides which error is reported first.
    """
    title = serializers.CharField(max_length=255, error_messages=required_messages("Title is required"))
    mainTitle = serializers.CharField(
        source="main_title",
        max_length=255,
        error_messages=required_messages("Main title is required"),
    )
    description = serializers.CharField(error_messages=required_messages("Description is required"))
    date = serializers.CharField(max_length=100, error_messages=required_messages("Date is required"))
    eventDate = serializers.DateTimeField(
        source="event_date",
        error_messages=required_messages("Valid event date is required", date="Valid event date is required"),
    )
    locationEvent = serializers.CharField(source="location", max_length=255, required=False)
    image = serializers.CharField(max_length=1024, required=False, allow_blank=True)
    link = serializers.CharField(max_length=1024, required=False, allow_blank=True)
    maxParticipants = serializers.IntegerField(
        source="max_participants",
        required=False,
        allow_null=True,
        min_value=1,
        error_messages={
            "invalid": "Max participants must be a whole number",
            "min_value": "Max participants must be at least 1",
        },
    )
    registrationFee = serializers.DecimalField(
        source="registration_fee",
        max_digits=10,
        decimal_places=2,
        min_value=0,
        required=False,
        error_messages={
            "invalid": "Registration fee must be a number",
            "min_value": "Registration fee cannot be negative",
        },
    )
    isUpcoming = serializers.BooleanField(source="is_upcoming", required=False)
    isActive = serializers.BooleanField(source="is_active", required=False)

    def validate_title(self, value):
        return _clean_line(value, "Title is required", max_length=255)

    def validate_mainTitle(self, value):
        return _clean_line(value, "Main title is required", max_length=255)

    def validate_description(self, value):
        value = sanitize_description(value)
        if not value:
            raise serializers.ValidationError("Description is required")
        return value

    def validate_date(self, value):
        return _clean_line(value, "Date is required", max_length=100)

    def validate_locationEvent(self, value):
        return sanitize_line(value, max_length=255) or "Online"

    def validate(self, attrs):
        # The API speaks isActive; the model keeps an explicit status
        if "is_active" in attrs:
            is_active = attrs.pop("is_active")
            attrs["status"] = Event.STATUS_ACTIVE if is_active else Event.STATUS_RETIRED
        return attrs


# -----------------------------------------
# BOOKINGS
# -----------------------------------------
class BookingCreateSerializer(serializers.Serializer):
    eventId = serializers.IntegerField(source="event_id", error_messages=required_messages("Event ID is required"))
    name = serializers.CharField(max_length=150, error_messages=required_messages("Name is required"))
    phone = serializers.CharField(max_length=30, error_messages=required_messages("Phone number is required"))
    email = NormalizedEmailField(max_length=254, error_messages=required_messages("Valid email is required"))
    nationalId = serializers.CharField(
        source="national_id",
        max_length=50,
        error_messages=required_messages("National ID is required"),
    )
    academicYear = serializers.CharField(
        source="academic_year",
        max_length=50,
        error_messages=required_messages("Academic year is required"),
    )
    academicDivision = serializers.CharField(
        source="academic_division",
        max_length=100,
        error_messages=required_messages("Academic division is required"),
    )
    notes = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_name(self, value):
        return _clean_line(value, "Name is required", max_length=150)

    def validate_phone(self, value):
        return _clean_line(value, "Phone number is required", max_length=30)

    def validate_nationalId(self, value):
        return _clean_line(value, "National ID is required", max_length=50)

    def validate_academicYear(self, value):
        return _clean_line(value, "Academic year is required", max_length=50)

    def validate_academicDivision(self, value):
        return _clean_line(value, "Academic division is required", max_length=100)

    def validate_notes(self, value):
        return sanitize_text(value)


class PaymentUpdateSerializer(serializers.Serializer):
    paymentStatus = serializers.ChoiceField(
        source="payment_status",
        choices=EventBooking.PAYMENT_CHOICES,
        error_messages=required_messages("Invalid payment status", invalid_choice="Invalid payment status"),
    )
    paymentMethod = serializers.CharField(source="payment_method", max_length=50, required=False, allow_blank=True)
    paymentReference = serializers.CharField(
        source="payment_reference",
        max_length=255,
        required=False,
        allow_blank=True,
    )


class NotesUpdateSerializer(serializers.Serializer):
    notes = serializers.CharField(
        required=False,
        allow_blank=True,
        trim_whitespace=False,
        error_messages={"invalid": "Notes must be text", "null": "Notes must be text"},
    )

    def validate_notes(self, value):
        return sanitize_text(value)


class BookingSerializer(serializers.ModelSerializer):
    _id = serializers.IntegerField(source="id", read_only=True)
    eventId = serializers.IntegerField(source="event_id", read_only=True)
    nationalId = serializers.CharField(source="national_id", read_only=True)
    academicYear = serializers.CharField(source="academic_year", read_only=True)
    academicDivision = serializers.CharField(source="academic_division", read_only=True)
    paymentStatus = serializers.CharField(source="payment_status", read_only=True)
    paymentAmount = serializers.DecimalField(
        source="payment_amount",
        max_digits=10,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
    )
    paymentMethod = serializers.CharField(source="payment_method", read_only=True)
    paymentReference = serializers.CharField(source="payment_reference", read_only=True)
    paymentDate = serializers.DateTimeField(source="payment_date", read_only=True)
    isConfirmed = serializers.BooleanField(source="is_confirmed", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = EventBooking
        fields = [
            "_id",
            "eventId",
            "name",
            "phone",
            "email",
            "nationalId",
            "academicYear",
            "academicDivision",
            "notes",
            "paymentStatus",
            "paymentAmount",
            "paymentMethod",
            "paymentReference",
            "paymentDate",
            "isConfirmed",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


class BookingListSerializer(BookingSerializer):
    """Listed bookings carry a short reference to their event."""
    eventId = EventSummarySerializer(source="event", read_only=True)


class BookingDetailSerializer(BookingSerializer):
    eventId = EventSerializer(source="event", read_only=True)
