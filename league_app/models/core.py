# file: league_app/models/core.py
"""Core league entities: teams, groups and user profiles.

Contains:
- :class:`Team` with optional college affiliation and a hosted logo URL.
- :class:`Group` (pool/division) whose ``teams`` list is the authoritative
  membership used for standings.
- :class:`UserProfile` storing the league role of an auth user.

``Team.current_group`` mirrors group membership for quick display. It is a
derived cache maintained by :mod:`league_app.services.groups`; never edit it
directly.
"""

from __future__ import annotations

from django.conf import settings
from django.db import models


# --- Team ------------------------------------------------------------------


class Team(models.Model):
    """A college team taking part in the league.

    Notes:
        ``name`` is globally unique among teams.
    """

    name = models.CharField("Team name", max_length=255, unique=True)
    college = models.CharField("College", max_length=255, blank=True, null=True)
    logo_url = models.URLField("Logo URL", max_length=500, blank=True, null=True)
    current_group = models.ForeignKey(
        "league_app.Group",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="current_teams",
        verbose_name="Current group",
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Team"
        verbose_name_plural = "Teams"
        ordering = ("name",)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.name


# --- Group -----------------------------------------------------------------


class Group(models.Model):
    """A named subset of teams that play each other for standings purposes.

    Groups are listed (and their tables emitted) in declaration order, i.e. by
    primary key.
    """

    name = models.CharField("Group name", max_length=255)
    description = models.TextField("Description", blank=True, null=True)
    teams = models.ManyToManyField(
        Team, blank=True, related_name="member_groups", verbose_name="Teams"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Group"
        verbose_name_plural = "Groups"
        ordering = ("id",)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.name


# --- User profile ----------------------------------------------------------


class UserProfile(models.Model):
    """League role and affiliation attached to an auth user."""

    class Role(models.TextChoices):
        """Roles known to the league portal."""

        ADMIN = "admin", "Admin"
        COLLEGE_HEAD = "collegeHead", "College head"
        STUDENT = "student", "Student"

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="league_profile",
        verbose_name="User",
    )
    role = models.CharField("Role", max_length=20, choices=Role.choices, default=Role.STUDENT)
    college = models.CharField("College", max_length=255, blank=True, null=True)
    team = models.ForeignKey(
        Team,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="members",
        verbose_name="Team",
    )
    photo_url = models.URLField("Photo URL", max_length=500, blank=True, null=True)

    class Meta:
        verbose_name = "User profile"
        verbose_name_plural = "User profiles"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.user} ({self.get_role_display()})"

    @property
    def is_league_admin(self) -> bool:
        """``True`` for the admin role or for Django staff accounts."""
        return self.role == self.Role.ADMIN or bool(getattr(self.user, "is_staff", False))
