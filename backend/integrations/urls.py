from django.urls import path
from .views import TranslateView, WeatherView

app_name = "integrations"

urlpatterns = [
    path("translate/", TranslateView.as_view(), name="translate"),
    path("weather/", WeatherView.as_view(), name="weather"),
]
