from django.urls import path
from .views import PaymentCreateView

app_name = "payments"

urlpatterns = [
    path("payments/", PaymentCreateView.as_view(), name="payment-create"),
]
