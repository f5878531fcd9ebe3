"""
Soft delete (archiving) infrastructure for the kiosk POS.

Menu items that stop being sold and staff that leave are archived rather than
deleted, so that historical orders and reports keep their references.
"""

from django.db import models
from django.utils import timezone


class SoftDeleteQuerySet(models.QuerySet):
    """
    Custom QuerySet that provides soft delete functionality.
    """

    def active(self):
        """Return only active (non-archived) records."""
        return self.filter(is_active=True)

    def archived(self):
        """Return only archived records."""
        return self.filter(is_active=False)


class SoftDeleteManager(models.Manager):
    """
    Custom manager that filters out archived records by default.
    """

    def get_queryset(self):
        return SoftDeleteQuerySet(self.model, using=self._db).active()

    def with_archived(self):
        """Return all records including archived ones."""
        return SoftDeleteQuerySet(self.model, using=self._db)

    def archived_only(self):
        """Return only archived records."""
        return SoftDeleteQuerySet(self.model, using=self._db).archived()


class SoftDeleteMixin(models.Model):
    """
    Abstract base class that provides soft delete functionality.

    Models inheriting from this mixin will have:
    - is_active field to mark records as archived
    - archived_at timestamp when record was archived
    - archive() and unarchive() methods
    - Custom manager that filters archived records by default
    """

    is_active = models.BooleanField(
        default=True,
        db_index=True,
        help_text="Designates whether this record is active. "
                  "Inactive records are considered archived/soft-deleted."
    )

    archived_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Timestamp when this record was archived."
    )

    objects = SoftDeleteManager()

    class Meta:
        abstract = True

    def archive(self):
        """Archive (soft delete) this record."""
        self.is_active = False
        self.archived_at = timezone.now()
        self.save(update_fields=['is_active', 'archived_at'])

    def unarchive(self):
        """Unarchive (restore) this record."""
        self.is_active = True
        self.archived_at = None
        self.save(update_fields=['is_active', 'archived_at'])

    def set_active(self, active):
        """Archive or restore depending on ``active``; no-op when unchanged."""
        if active and not self.is_active:
            self.unarchive()
        elif not active and self.is_active:
            self.archive()

    @property
    def is_archived(self):
        return not self.is_active

    def delete(self, using=None, keep_parents=False):
        """
        Override delete to perform soft delete instead.
        """
        self.archive()
