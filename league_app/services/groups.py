# file: league_app/services/groups.py
"""Group membership mutations and the ``Team.current_group`` cache.

``Group.teams`` is the single source of truth for membership. The
``current_group`` column on :class:`~league_app.models.Team` is derived from
it: the lowest-id group listing the team, or ``None``. Every membership change
must end with :func:`refresh_current_group` for the affected teams; the
``m2m_changed`` receiver in :mod:`league_app.signals` does that for changes
made through the ORM.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from django.db import transaction

from league_app.models import Group, Team

logger = logging.getLogger(__name__)

__all__ = ["refresh_current_group", "move_team"]


def refresh_current_group(team_ids: Iterable[int]) -> int:
    """Recompute ``current_group`` for the given teams.

    Args:
        team_ids: Primary keys of teams whose membership may have changed.

    Returns:
        int: Number of teams whose cached group was updated.
    """
    ids = {int(tid) for tid in team_ids if tid is not None}
    if not ids:
        return 0

    first_group: dict[int, int] = {}
    memberships = (
        Group.teams.through.objects.filter(team_id__in=ids)
        .order_by("group_id")
        .values_list("team_id", "group_id")
    )
    for team_id, group_id in memberships:
        first_group.setdefault(team_id, group_id)

    changed = 0
    for team in Team.objects.filter(id__in=ids).only("id", "current_group"):
        desired = first_group.get(team.id)
        if team.current_group_id != desired:
            team.current_group_id = desired
            team.save(update_fields=["current_group"])
            changed += 1
    return changed


@transaction.atomic
def move_team(team: Team, target: Optional[Group]) -> Team:
    """Make ``target`` the only group of ``team`` (or remove it from all).

    Args:
        team: Team to move.
        target: Destination group, or ``None`` to leave every group.

    Returns:
        Team: The team with its refreshed ``current_group``.
    """
    previous = list(team.member_groups.exclude(pk=getattr(target, "pk", None)))
    for group in previous:
        group.teams.remove(team)
        group.save(update_fields=["updated_at"])

    if target is not None and not target.teams.filter(pk=team.pk).exists():
        target.teams.add(team)
        target.save(update_fields=["updated_at"])

    refresh_current_group([team.pk])
    team.refresh_from_db(fields=["current_group"])
    logger.info(
        "Moved team %s from %s to %s",
        team.pk,
        [g.pk for g in previous] or None,
        getattr(target, "pk", None),
    )
    return team
