from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import TranslateRequestSerializer, WeatherQuerySerializer
from .services import IntegrationError, TranslationService, WeatherService


class TranslateView(APIView):
    """
    POST {texts, targetLanguage}: translate a batch of UI strings.
    Upstream errors are passed through with their status code.
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = TranslateRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"error": "Invalid request. Missing texts or target language."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            translated = TranslationService.translate(
                serializer.validated_data["texts"], serializer.validated_data["targetLanguage"]
            )
        except IntegrationError as e:
            return Response({"error": e.message}, status=e.status_code)

        return Response({"translatedTexts": translated})


class WeatherView(APIView):
    """GET ?lat=&lon=: current weather summary for the login screen."""

    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request, *args, **kwargs):
        serializer = WeatherQuerySerializer(data=request.query_params)
        if not serializer.is_valid():
            return Response(
                {"error": "Latitude and longitude are required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            weather = WeatherService.current(
                serializer.validated_data["lat"], serializer.validated_data["lon"]
            )
        except IntegrationError as e:
            return Response({"error": e.message}, status=status.HTTP_502_BAD_GATEWAY)

        return Response(weather)
