from django.contrib import admin
from .models import Event, EventBooking


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ('title', 'event_date', 'status', 'is_upcoming', 'max_participants', 'registration_fee', 'created_by')
    list_filter = ('status', 'is_upcoming')
    search_fields = ('title', 'main_title', 'location')
    ordering = ('-created_at',)
    raw_id_fields = ('created_by',)


@admin.register(EventBooking)
class EventBookingAdmin(admin.ModelAdmin):
    list_display = ('name', 'event', 'national_id', 'payment_status', 'is_confirmed', 'created_at')
    list_filter = ('payment_status', 'is_confirmed', 'event')
    search_fields = ('name', 'email', 'national_id', 'phone')
    ordering = ('-created_at',)
    readonly_fields = ('payment_date', 'created_at', 'updated_at')
