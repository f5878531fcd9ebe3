from rest_framework import serializers
from core_backend.base import BaseModelSerializer
from .models import User


class PositionField(serializers.ChoiceField):
    """
    Staff role exposed under its display name ("Manager", "Cashier").

    Accepts either the display name or the stored value, case-insensitively,
    because terminals send whatever the manager typed.
    """

    def __init__(self, **kwargs):
        super().__init__(choices=User.Role.choices, **kwargs)

    def to_internal_value(self, data):
        text = str(data).strip()
        for value, label in User.Role.choices:
            if text.lower() in (value.lower(), str(label).lower()):
                return value
        self.fail("invalid_choice", input=data)

    def to_representation(self, value):
        return User.Role(value).label if value in User.Role.values else value


class UserSerializer(BaseModelSerializer):
    """Current staff member, as returned by /me/ and login."""

    position = PositionField(source="role", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "name", "email", "position", "role", "is_active"]
        read_only_fields = fields


class EmployeeSerializer(BaseModelSerializer):
    """
    Employee record for the manager dashboard.

    ``status`` is "Employed" for active staff; any other value archives the
    employee on write.
    """

    position = PositionField(source="role")
    status = serializers.CharField(source="employment_status", required=False)
    username = serializers.CharField(required=False, max_length=150)
    password = serializers.CharField(
        required=False, write_only=True, allow_blank=False, style={"input_type": "password"}
    )

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "name",
            "email",
            "position",
            "status",
            "password",
            "date_joined",
        ]
        read_only_fields = ["id", "date_joined"]
        updatable_fields = ["name", "position", "status", "email", "password"]

    def validate_username(self, value):
        queryset = User.objects.with_archived().filter(username=value)
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        if queryset.exists():
            raise serializers.ValidationError("A staff member with that username already exists.")
        return value

    def create(self, validated_data):
        from .services import EmployeeService

        status_text = validated_data.pop("employment_status", None)
        employee = EmployeeService.create_employee(**validated_data)
        if status_text is not None:
            employee.set_active(EmployeeService.is_employed_status(status_text))
        return employee

    def update(self, instance, validated_data):
        from .services import EmployeeService

        status_text = validated_data.pop("employment_status", None)
        password = validated_data.pop("password", None)
        instance = super().update(instance, validated_data)
        if password:
            instance.set_password(password)
            instance.save(update_fields=["password"])
        if status_text is not None:
            instance.set_active(EmployeeService.is_employed_status(status_text))
        return instance


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(style={"input_type": "password"}, trim_whitespace=False)


class RoleChangeSerializer(serializers.Serializer):
    staffId = serializers.IntegerField()
    newPosition = PositionField()
