"""Base abstract models shared by every module.

Provides:
- ``BaseModel``: integer primary key + created_at / updated_at timestamps.
- ``SoftDeleteModel``: Extends BaseModel with soft-delete via ``deleted_at``.

Design decisions:
- Single ``deleted_at`` field instead of dual ``is_deleted`` + ``deleted_at``.
- ``objects`` manager returns ALL records (unfiltered).  Use ``.alive()``
  explicitly to exclude soft-deleted rows.
- ``delete()`` returns Django-compatible ``(count, {label: count})`` tuple.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified (Django skips ``auto_now`` fields otherwise).
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with timestamp bookkeeping.

    The primary key is the project-wide ``BigAutoField`` default.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Soft Delete infrastructure
# ---------------------------------------------------------------------------


class SoftDeleteQuerySet(models.QuerySet):
    """QuerySet with soft-delete helpers."""

    def alive(self) -> SoftDeleteQuerySet:
        """Return only non-deleted records."""
        return self.filter(deleted_at__isnull=True)

    def dead(self) -> SoftDeleteQuerySet:
        """Return only soft-deleted records."""
        return self.filter(deleted_at__isnull=False)

    def delete(self) -> tuple[int, dict[str, int]]:
        """Bulk soft-delete: sets ``deleted_at`` + ``updated_at``."""
        now = timezone.now()
        count = self.alive().update(deleted_at=now, updated_at=now)
        return count, {self.model._meta.label: count}


class SoftDeleteManager(models.Manager):
    """Manager that exposes ``.alive()`` / ``.dead()`` on the queryset."""

    def get_queryset(self) -> SoftDeleteQuerySet:
        return SoftDeleteQuerySet(self.model, using=self._db)

    def alive(self) -> SoftDeleteQuerySet:
        return self.get_queryset().alive()

    def dead(self) -> SoftDeleteQuerySet:
        return self.get_queryset().dead()


class SoftDeleteModel(BaseModel):
    """Abstract model with soft-delete via a single ``deleted_at`` timestamp.

    Orders keep a PROTECT reference to their product, so catalog rows are
    never physically removed while order history points at them.
    """

    deleted_at = models.DateTimeField(
        null=True,
        blank=True,
        default=None,
        db_index=True,
    )

    objects = SoftDeleteManager()

    class Meta:
        abstract = True

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def delete(self, using=None, keep_parents=False) -> tuple[int, dict[str, int]]:
        """Soft-delete this instance (no-op if already deleted)."""
        if self.is_deleted:
            return 0, {}
        self.deleted_at = timezone.now()
        self.save(update_fields=["deleted_at", "updated_at"])
        return 1, {self._meta.label: 1}
