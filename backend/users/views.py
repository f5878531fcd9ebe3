import logging

from django.utils.decorators import method_decorator
from django_ratelimit.decorators import ratelimit
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core_backend.base.viewsets import BaseViewSet
from core_backend.utils import get_client_ip
from .models import User
from .permissions import IsManagerOrHigher
from .serializers import (
    EmployeeSerializer,
    LoginSerializer,
    RoleChangeSerializer,
    UserSerializer,
)
from .services import EmployeeService, LoginError, UserService

logger = logging.getLogger(__name__)


@method_decorator(
    ratelimit(key=get_client_ip, rate="5/m", method="POST", block=True), name="post"
)
class LoginView(APIView):
    """
    Username/password sign-in for the cashier and manager terminals.
    """

    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            user = UserService.authenticate_staff(request, **serializer.validated_data)
        except LoginError as e:
            return Response({"error": e.message}, status=e.status_code)

        tokens = UserService.generate_tokens_for_user(user)
        response = Response(UserService.login_payload(user))
        UserService.set_auth_cookies(response, tokens["access"], tokens["refresh"])
        return response


class LogoutView(APIView):
    permission_classes = [permissions.AllowAny]

    def post(self, request, *args, **kwargs):
        response = Response(
            {"detail": "Successfully logged out."}, status=status.HTTP_200_OK
        )
        UserService.clear_auth_cookies(response)
        return response


class CurrentUserView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return Response({"user": UserSerializer(request.user).data})


class EmployeeViewSet(BaseViewSet):
    """
    Employee management for managers. Lists former employees too; deleting
    an employee archives them.
    """

    queryset = User.objects.with_archived()
    serializer_class = EmployeeSerializer
    permission_classes = [IsManagerOrHigher]
    search_fields = ["name", "username"]
    filterset_fields = ["role", "is_active"]
    ordering_fields = ["id", "name", "role"]

    def create(self, request, *args, **kwargs):
        if not request.data.get("name") or not request.data.get("position"):
            return Response(
                {"error": "Missing required fields"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return super().create(request, *args, **kwargs)


class EmployeeRoleView(APIView):
    """PUT {staffId, newPosition}: shortcut used by the employee table."""

    permission_classes = [IsManagerOrHigher]

    def put(self, request, *args, **kwargs):
        serializer = RoleChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            employee = EmployeeService.change_role(
                serializer.validated_data["staffId"],
                serializer.validated_data["newPosition"],
            )
        except User.DoesNotExist:
            return Response(
                {"error": "Employee not found"}, status=status.HTTP_404_NOT_FOUND
            )

        return Response(
            {"success": True, "employee": EmployeeSerializer(employee).data}
        )
