import logging

from django.conf import settings
from django.contrib.auth import authenticate
from django.db import transaction
from django.utils.text import slugify
from rest_framework_simplejwt.tokens import RefreshToken

from .models import User

logger = logging.getLogger(__name__)


class LoginError(Exception):
    """Raised when a login attempt is refused; carries the HTTP status to use."""

    def __init__(self, message, status_code):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UserService:
    # Roles allowed to sign in to a terminal, mapped to the client-side role name.
    TERMINAL_ROLES = {
        User.Role.MANAGER: "manager",
        User.Role.CASHIER: "cashier",
    }

    @staticmethod
    def authenticate_staff(request, username: str, password: str) -> User:
        """
        Check credentials and terminal access.

        Raises LoginError(401) for unknown users or bad passwords and
        LoginError(403) for staff whose position may not use a terminal.
        """
        user = authenticate(request, username=username, password=password)
        if user is None:
            logger.warning(f"Failed login attempt for username '{username}'")
            raise LoginError("Invalid username or password", 401)

        if user.role not in UserService.TERMINAL_ROLES:
            logger.warning(f"Login refused for {username}: position {user.role} has no terminal access")
            raise LoginError("Unauthorized position", 403)

        logger.info(f"Staff {user.id} ({user.role}) logged in")
        return user

    @staticmethod
    def login_payload(user: User) -> dict:
        return {
            "role": UserService.TERMINAL_ROLES[user.role],
            "staff_id": user.id,
            "name": user.name,
        }

    @staticmethod
    def generate_tokens_for_user(user: User) -> dict:
        refresh = RefreshToken.for_user(user)
        return {
            "refresh": str(refresh),
            "access": str(refresh.access_token),
        }

    @staticmethod
    def set_auth_cookies(response, access_token, refresh_token, cookie_path="/api"):
        """
        Set the JWT cookies for staff terminals on the /api path.
        """
        is_secure = getattr(settings, 'SESSION_COOKIE_SECURE', not settings.DEBUG)
        samesite_policy = getattr(settings, 'SESSION_COOKIE_SAMESITE', 'Lax')

        response.set_cookie(
            key=settings.SIMPLE_JWT["AUTH_COOKIE"],
            value=access_token,
            max_age=settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"].total_seconds(),
            path=cookie_path,
            httponly=True,
            secure=is_secure,
            samesite=samesite_policy,
        )
        response.set_cookie(
            key=settings.SIMPLE_JWT["AUTH_COOKIE_REFRESH"],
            value=refresh_token,
            max_age=settings.SIMPLE_JWT["REFRESH_TOKEN_LIFETIME"].total_seconds(),
            path=cookie_path,
            httponly=True,
            secure=is_secure,
            samesite=samesite_policy,
        )

    @staticmethod
    def clear_auth_cookies(response, cookie_path="/api"):
        response.delete_cookie(settings.SIMPLE_JWT["AUTH_COOKIE"], path=cookie_path)
        response.delete_cookie(settings.SIMPLE_JWT["AUTH_COOKIE_REFRESH"], path=cookie_path)


class EmployeeService:
    @staticmethod
    def is_employed_status(status_text) -> bool:
        return str(status_text).strip().lower() == "employed"

    @staticmethod
    def unique_username(name: str) -> str:
        base = slugify(name).replace("-", ".") or "staff"
        candidate = base
        suffix = 1
        while User.objects.with_archived().filter(username=candidate).exists():
            suffix += 1
            candidate = f"{base}{suffix}"
        return candidate

    @staticmethod
    @transaction.atomic
    def create_employee(name: str, role: str, username: str = None, password: str = None, **extra) -> User:
        """
        Hire a new employee. Without a password the account cannot log in
        until a manager sets one.
        """
        username = username or EmployeeService.unique_username(name)
        employee = User.objects.create_user(
            username=username, password=password, name=name, role=role, **extra
        )
        logger.info(f"Employee {employee.id} created as {role}")
        return employee

    @staticmethod
    @transaction.atomic
    def change_role(staff_id: int, new_role: str) -> User:
        employee = User.objects.with_archived().select_for_update().get(pk=staff_id)
        previous = employee.role
        employee.role = new_role
        employee.save(update_fields=["role", "updated_at"])
        logger.info(f"Employee {staff_id} position changed from {previous} to {new_role}")
        return employee
