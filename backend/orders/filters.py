import django_filters

from .models import Order


class OrderFilter(django_filters.FilterSet):
    """
    Narrow the order history by calendar parts of the order time, in the
    store's time zone: ``?year=2024&month=11&day=3``.
    """

    year = django_filters.NumberFilter(field_name="time", lookup_expr="year")
    month = django_filters.NumberFilter(field_name="time", lookup_expr="month")
    day = django_filters.NumberFilter(field_name="time", lookup_expr="day")
    staff = django_filters.NumberFilter(field_name="staff_id")

    class Meta:
        model = Order
        fields = ["year", "month", "day", "staff"]
