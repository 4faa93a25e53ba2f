# events/models.py
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q


class EventQuerySet(models.QuerySet):
    def active(self):
        return self.filter(status=Event.STATUS_ACTIVE)


class Event(models.Model):
    # Lifecycle: "deleting" an event retires it; rows are never removed
    STATUS_ACTIVE = "active"
    STATUS_RETIRED = "retired"

    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_RETIRED, "Retired"),
    ]

    title = models.CharField(max_length=255)
    main_title = models.CharField(max_length=255)
    description = models.TextField()
    # Free-form date as shown to visitors, e.g. "12-14 March"
    date = models.CharField(max_length=100)
    event_date = models.DateTimeField()
    location = models.CharField(max_length=255, default="Online")
    image = models.CharField(max_length=1024, blank=True, default="")
    link = models.CharField(max_length=1024, blank=True, default="")

    # None means unlimited
    max_participants = models.PositiveIntegerField(
        blank=True,
        null=True,
        validators=[MinValueValidator(1)],
    )
    registration_fee = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0)],
    )

    is_upcoming = models.BooleanField(default=True)
    status = models.CharField(
        max_length=16,
        choices=STATUS_CHOICES,
        default=STATUS_ACTIVE,
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name="created_events",
        null=True,
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = EventQuerySet.as_manager()

    class Meta:
        indexes = [
            models.Index(
                fields=["status", "event_date"],
                name="event_status_date_idx",
            ),
            models.Index(
                fields=["created_at"],
                name="event_created_idx",
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(registration_fee__gte=0),
                name="event_fee_non_negative",
            ),
        ]

    def __str__(self):
        return self.title

    @property
    def is_active(self) -> bool:
        return self.status == self.STATUS_ACTIVE

    @property
    def is_free(self) -> bool:
        return not self.registration_fee


class EventBooking(models.Model):
    PAYMENT_PENDING = "pending"
    PAYMENT_PAID = "paid"
    PAYMENT_CANCELLED = "cancelled"

    PAYMENT_CHOICES = [
        (PAYMENT_PENDING, "Pending"),
        (PAYMENT_PAID, "Paid"),
        (PAYMENT_CANCELLED, "Cancelled"),
    ]

    # Bookings in these states occupy a seat
    SEAT_HOLDING_STATUSES = (PAYMENT_PENDING, PAYMENT_PAID)

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="bookings")

    name = models.CharField(max_length=150)
    phone = models.CharField(max_length=30)
    email = models.EmailField()
    national_id = models.CharField(max_length=50)
    academic_year = models.CharField(max_length=50)
    academic_division = models.CharField(max_length=100)
    notes = models.TextField(blank=True, default="")

    payment_status = models.CharField(max_length=16, choices=PAYMENT_CHOICES, default=PAYMENT_PENDING)
    payment_amount = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    payment_method = models.CharField(max_length=50, blank=True, default="")
    payment_reference = models.CharField(max_length=255, blank=True, default="")
    payment_date = models.DateTimeField(blank=True, null=True)
    is_confirmed = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            # One registration per person per event, enforced by the database
            models.UniqueConstraint(
                fields=["event", "national_id"],
                name="uniq_booking_event_national_id",
            ),
        ]
        indexes = [
            models.Index(
                fields=["event", "created_at"],
                name="booking_event_created_idx",
            ),
            models.Index(
                fields=["payment_status"],
                name="booking_payment_status_idx",
            ),
        ]

    def __str__(self):
        return f"{self.name} - {self.event.title}"
