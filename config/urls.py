from django.contrib import admin
from django.urls import path, include
from core.views import HealthCheckView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("users/", include("accounts.urls")),
    path("dashboard/", include("events.urls_dashboard")),
    path("", include("events.urls")),
    path("health", HealthCheckView.as_view(), name="health-check"),
]
