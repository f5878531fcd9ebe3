import logging
from typing import List

import requests
from django.conf import settings

# Set up a logger for this service
logger = logging.getLogger(__name__)


class IntegrationError(Exception):
    """An upstream API call failed or is not configured."""

    def __init__(self, message, status_code=502):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TranslationService:
    """
    A service to interact with the Google Cloud Translation API (v2).
    Used by the kiosk to show the menu and prompts in the guest's language.
    """

    @staticmethod
    def translate(texts: List[str], target_language: str) -> List[str]:
        """
        Translates a batch of strings in one upstream call.

        Returns:
            list: translated strings, in the same order as ``texts``.

        Raises:
            IntegrationError: 500 when no API key is configured; otherwise the
            upstream status code and message, or 502 when the API is unreachable.
        """
        api_key = settings.GOOGLE_TRANSLATE_API_KEY

        if not api_key:
            logger.error("Google Translate API key is not configured in settings.")
            raise IntegrationError("Translation service not configured", status_code=500)

        payload = {"q": texts, "target": target_language, "format": "text"}

        try:
            logger.info(f"Translating {len(texts)} texts to {target_language}")
            response = requests.post(
                settings.GOOGLE_TRANSLATE_URL,
                params={"key": api_key},
                json=payload,
                timeout=settings.INTEGRATION_TIMEOUT,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"HTTP request to Google Translate API failed: {e}")
            raise IntegrationError("Translation failed") from e

        try:
            data = response.json()
        except ValueError:
            data = {}

        if not response.ok:
            error = data.get("error") if isinstance(data, dict) else None
            message = (error or {}).get("message") or "Translation failed"
            status_code = (error or {}).get("code") or response.status_code
            logger.error(f"Google Translate API error: {status_code} - {message}")
            raise IntegrationError(message, status_code=status_code)

        try:
            return [t["translatedText"] for t in data["data"]["translations"]]
        except (KeyError, TypeError) as e:
            logger.error(f"Unexpected Google Translate API response: {data}")
            raise IntegrationError("Invalid translation API response", status_code=500) from e


class WeatherService:
    """
    A service to interact with the OpenWeatherMap current weather API.
    Feeds the small weather widget on the staff login screen.
    """

    # Condition groups the login screen has an icon for.
    ICONS = {
        "clear": "clear",
        "clouds": "clouds",
        "rain": "rain",
        "drizzle": "rain",
        "thunderstorm": "rain",
        "snow": "snow",
    }
    DEFAULT_ICON = "clouds"

    @staticmethod
    def current(latitude, longitude) -> dict:
        """
        Current conditions at the given coordinates, in Fahrenheit.

        Returns:
            dict: {'temperature', 'description', 'is_day', 'icon'}
        """
        api_key = settings.OPENWEATHER_API_KEY
        if not api_key:
            logger.warning("OpenWeatherMap API key is not configured in settings.")

        params = {
            "lat": latitude,
            "lon": longitude,
            "appid": api_key,
            "units": "imperial",
        }

        try:
            response = requests.get(
                settings.OPENWEATHER_URL, params=params, timeout=settings.INTEGRATION_TIMEOUT
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            logger.error(f"HTTP request to OpenWeatherMap failed: {e}")
            raise IntegrationError("Weather data retrieval failed") from e
        except ValueError as e:
            logger.error(f"OpenWeatherMap returned a non-JSON body: {e}")
            raise IntegrationError("Weather data retrieval failed") from e

        try:
            return WeatherService.summarize(data)
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected OpenWeatherMap response: {data}")
            raise IntegrationError("Weather data retrieval failed") from e

    @staticmethod
    def summarize(data: dict) -> dict:
        condition = data["weather"][0]
        sun = data.get("sys", {})
        observed = data.get("dt")

        is_day = True
        if observed is not None and "sunrise" in sun and "sunset" in sun:
            is_day = sun["sunrise"] <= observed < sun["sunset"]

        return {
            "temperature": data["main"]["temp"],
            "description": condition.get("description", ""),
            "is_day": is_day,
            "icon": WeatherService.ICONS.get(
                str(condition.get("main", "")).lower(), WeatherService.DEFAULT_ICON
            ),
        }
