from django.contrib.auth.models import (
    AbstractBaseUser,
    BaseUserManager,
    PermissionsMixin,
)
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from core_backend.utils.archiving import SoftDeleteMixin, SoftDeleteManager


class UserManager(SoftDeleteManager, BaseUserManager):
    """
    Staff manager: hides former employees by default and knows how to create
    staff accounts with hashed passwords.
    """

    use_in_migrations = True

    def get_by_natural_key(self, username):
        return self.with_archived().get(**{self.model.USERNAME_FIELD: username})

    def create_user(self, username, password=None, **extra_fields):
        if not username:
            raise ValueError("The username must be set")
        extra_fields.setdefault("role", User.Role.CASHIER)
        email = extra_fields.pop("email", "") or ""
        user = self.model(
            username=username, email=self.normalize_email(email), **extra_fields
        )
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, password=None, **extra_fields):
        extra_fields.setdefault("role", User.Role.MANAGER)
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        return self.create_user(username, password, **extra_fields)


class User(SoftDeleteMixin, AbstractBaseUser, PermissionsMixin):
    """
    A member of staff. Archived staff are former employees; they keep their
    rows so historical orders and Z reports still name them.
    """

    class Role(models.TextChoices):
        MANAGER = "MANAGER", _("Manager")
        CASHIER = "CASHIER", _("Cashier")
        KITCHEN = "KITCHEN", _("Kitchen")

    username = models.CharField(
        _("username"),
        max_length=150,
        unique=True,
        help_text=_("Login name used on the cashier and manager terminals."),
    )
    name = models.CharField(_("name"), max_length=150)
    email = models.EmailField(_("email address"), blank=True)

    role = models.CharField(
        _("role"), max_length=50, choices=Role.choices, default=Role.CASHIER
    )

    is_staff = models.BooleanField(
        _("staff status"),
        default=False,
        help_text=_("Designates whether the user can log into this admin site."),
    )
    date_joined = models.DateTimeField(_("date joined"), default=timezone.now)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "username"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["is_active", "role"], name="users_active_role_idx"),
        ]

    def __str__(self):
        return self.name or self.username

    @property
    def is_manager(self):
        return self.role == self.Role.MANAGER

    @property
    def employment_status(self):
        return "Employed" if self.is_active else "Not Employed"
