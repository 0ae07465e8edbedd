"""Remove all league data from the database.

Deletes results, games, group memberships, groups, teams, player selections
and published content. User accounts and their profiles are kept (team links
are cleared by the foreign keys). **This cannot be undone**; use it only
outside production.
"""

from __future__ import annotations

from typing import Any

from django.core.management.base import BaseCommand
from django.db import transaction

from league_app.models import BlogPost, Game, Group, PlayerSelection, Result, Team, Vlog


class Command(BaseCommand):
    help = "Remove league data (teams, groups, games, results, content) from the database."

    @transaction.atomic
    def handle(self, *args: Any, **kwargs: Any) -> None:
        Result.objects.all().delete()
        Game.objects.all().delete()
        PlayerSelection.objects.all().delete()
        Group.objects.all().delete()
        Team.objects.all().delete()
        BlogPost.objects.all().delete()
        Vlog.objects.all().delete()

        self.stdout.write(self.style.WARNING("League data removed."))
