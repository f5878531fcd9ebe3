"""
URL configuration for core_backend project.

Every app registers its own endpoint names, so they are all mounted directly
under ``api/``. The kiosk is the exception and keeps its own prefix.
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path


def health_check(request):
    """Simple health check endpoint that doesn't require authentication"""
    return JsonResponse({"status": "ok", "message": "Backend is running"})


urlpatterns = [
    path("api/health/", health_check, name="health_check"),
    path("admin/", admin.site.urls),
    path("api/", include("users.urls")),
    path("api/", include("menu.urls")),
    path("api/kiosk/", include("kiosk.urls")),
    path("api/", include("orders.urls")),
    path("api/", include("payments.urls")),
    path("api/", include("inventory.urls")),
    path("api/", include("reports.urls")),
    path("api/", include("chatbot.urls")),
    path("api/", include("integrations.urls")),
]
