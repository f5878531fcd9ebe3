from rest_framework import serializers


class BaseModelSerializer(serializers.ModelSerializer):
    """
    Base serializer shared by the apps.

    Subclasses may list ``updatable_fields`` in their Meta; PartialUpdateMixin
    uses it to reject update requests that would change nothing.
    """

    class Meta:
        updatable_fields = []

    @classmethod
    def get_updatable_fields(cls):
        meta = getattr(cls, "Meta", None)
        fields = getattr(meta, "updatable_fields", None)
        if fields:
            return list(fields)
        return [
            name for name, field in cls().fields.items() if not field.read_only
        ]
