import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("main_title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("date", models.CharField(max_length=100)),
                ("event_date", models.DateTimeField()),
                ("location", models.CharField(default="Online", max_length=255)),
                ("image", models.CharField(blank=True, default="", max_length=1024)),
                ("link", models.CharField(blank=True, default="", max_length=1024)),
                (
                    "max_participants",
                    models.PositiveIntegerField(
                        blank=True,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                (
                    "registration_fee",
                    models.DecimalField(
                        decimal_places=2,
                        default=0,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("is_upcoming", models.BooleanField(default=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Active"), ("retired", "Retired")],
                        default="active",
                        max_length=16,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="created_events",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["status", "event_date"], name="event_status_date_idx"),
                    models.Index(fields=["created_at"], name="event_created_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("registration_fee__gte", 0)),
                        name="event_fee_non_negative",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="EventBooking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=150)),
                ("phone", models.CharField(max_length=30)),
                ("email", models.EmailField(max_length=254)),
                ("national_id", models.CharField(max_length=50)),
                ("academic_year", models.CharField(max_length=50)),
                ("academic_division", models.CharField(max_length=100)),
                ("notes", models.TextField(blank=True, default="")),
                (
                    "payment_status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("paid", "Paid"), ("cancelled", "Cancelled")],
                        default="pending",
                        max_length=16,
                    ),
                ),
                ("payment_amount", models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ("payment_method", models.CharField(blank=True, default="", max_length=50)),
                ("payment_reference", models.CharField(blank=True, default="", max_length=255)),
                ("payment_date", models.DateTimeField(blank=True, null=True)),
                ("is_confirmed", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="bookings",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["event", "created_at"], name="booking_event_created_idx"),
                    models.Index(fields=["payment_status"], name="booking_payment_status_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("event", "national_id"),
                        name="uniq_booking_event_national_id",
                    )
                ],
            },
        ),
    ]
