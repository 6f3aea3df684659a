"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Account(models.Model):
    """Persistence model for users. Owned by the login flow; read-only here."""

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    role = models.CharField(max_length=50)
    club_name = models.CharField(max_length=255, blank=True, null=True)

    class Meta:
        db_table = "users"

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for club events."""

    title = models.CharField(max_length=255)
    description = models.TextField()
    date = models.DateField()
    time = models.TimeField()
    location = models.CharField(max_length=255)
    poster = models.CharField(max_length=500, blank=True, null=True)
    created_by = models.IntegerField(db_index=True)
    club_name = models.CharField(max_length=255, blank=True, null=True)

    class Meta:
        db_table = "events"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.title


class Registration(models.Model):
    """Persistence model for student registrations. Read-only here.

    The event link carries no database constraint, so rows survive the
    deletion of their event.
    """

    event = models.ForeignKey(
        Event,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="registrations",
    )
    student = models.ForeignKey(
        Account, on_delete=models.CASCADE, related_name="registrations"
    )

    class Meta:
        db_table = "student_registrations"

    def __str__(self) -> str:
        return f"{self.student_id} -> {self.event_id}"
