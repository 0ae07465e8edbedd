# file: league_app/signals.py
"""Signal handlers keeping derived data in sync with group membership.

* Every ``m2m_changed`` on :attr:`Group.teams` refreshes the
  ``Team.current_group`` cache of the affected teams.
* Deleting a group refreshes its former members.
* Creating an auth user creates its :class:`UserProfile`.
"""

from __future__ import annotations

from typing import Any

from django.conf import settings
from django.db.models.signals import m2m_changed, post_delete, post_save, pre_delete
from django.dispatch import receiver

from .models import Group, Team, UserProfile
from .services.groups import refresh_current_group


# --- Group membership ------------------------------------------------------


@receiver(m2m_changed, sender=Group.teams.through)
def _group_membership_changed(
    sender: type[Any],
    instance: Group | Team,
    action: str,
    reverse: bool,
    pk_set: set[int] | None,
    **kwargs: Any,
) -> None:
    """Refresh the cached group of teams touched by a membership change.

    ``reverse`` is ``True`` when the change was made from the team side
    (``team.member_groups.add(...)``); then ``instance`` is the team.
    """
    if action == "pre_clear" and not reverse:
        # Remember members before the clear wipes them.
        instance._cleared_team_ids = list(instance.teams.values_list("id", flat=True))
        return
    if action not in {"post_add", "post_remove", "post_clear"}:
        return

    if reverse:
        team_ids = [instance.pk]
    elif action == "post_clear":
        team_ids = getattr(instance, "_cleared_team_ids", [])
    else:
        team_ids = list(pk_set or [])
    refresh_current_group(team_ids)


@receiver(pre_delete, sender=Group)
def _group_deleting(sender: type[Group], instance: Group, **kwargs: Any) -> None:
    """Remember the members of a group that is about to be deleted."""
    instance._former_team_ids = list(instance.teams.values_list("id", flat=True))


@receiver(post_delete, sender=Group)
def _group_deleted(sender: type[Group], instance: Group, **kwargs: Any) -> None:
    """Point former members at their next group (or none)."""
    refresh_current_group(getattr(instance, "_former_team_ids", []))


# --- Profiles --------------------------------------------------------------


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def _ensure_profile(sender: type[Any], instance: Any, created: bool, **kwargs: Any) -> None:
    """Give every new user a league profile (admin role for superusers)."""
    if not created or kwargs.get("raw"):
        return
    role = UserProfile.Role.ADMIN if getattr(instance, "is_superuser", False) else UserProfile.Role.STUDENT
    UserProfile.objects.get_or_create(user=instance, defaults={"role": role})
