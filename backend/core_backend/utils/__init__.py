"""
Utility functions for core_backend.
"""


def get_client_ip(group, request):
    """
    Extract the client IP from the request.

    Used as the django-ratelimit key for login throttling. ``group`` is
    required by django-ratelimit's key signature but unused.

    Kiosk terminals sit behind a single reverse proxy, which appends the
    address it saw to X-Forwarded-For, so the LAST entry is the trustworthy one.
    """
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        return x_forwarded_for.split(',')[-1].strip()

    return request.META.get('REMOTE_ADDR')
