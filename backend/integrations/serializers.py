from rest_framework import serializers


class TranslateRequestSerializer(serializers.Serializer):
    texts = serializers.ListField(child=serializers.CharField(allow_blank=True, trim_whitespace=False), allow_empty=False)
    targetLanguage = serializers.CharField()


class WeatherQuerySerializer(serializers.Serializer):
    lat = serializers.FloatField(min_value=-90, max_value=90)
    lon = serializers.FloatField(min_value=-180, max_value=180)
