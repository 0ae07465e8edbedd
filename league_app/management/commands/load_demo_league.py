"""Seed the database with a small demo league.

Creates two groups of college teams, a round of fixtures inside each group,
one cross-group friendly and results for most of the games. Existing league
data is removed first (see ``clear_demo_league``).
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from league_app.models import BlogPost, Game, GameStatus, Group, Team
from league_app.services.results import record_result

DEMO_GROUPS: dict[str, list[tuple[str, str]]] = {
    "Group A": [
        ("Northfield Owls", "Northfield College"),
        ("Riverside Rockets", "Riverside College"),
        ("Hillcrest Hawks", "Hillcrest College"),
    ],
    "Group B": [
        ("Lakeside Lions", "Lakeside College"),
        ("Westbrook Wolves", "Westbrook College"),
        ("Eastgate Eagles", "Eastgate College"),
    ],
}

# (home index, away index, home score, away score); ``None`` scores stay upcoming.
DEMO_FIXTURES: list[tuple[int, int, int | None, int | None]] = [
    (0, 1, 2, 1),
    (1, 2, 0, 0),
    (2, 0, 1, 3),
    (1, 0, None, None),
]


class Command(BaseCommand):
    help = "Fill the database with a demo league: teams, groups, games and results."

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--keep", action="store_true", help="Do not clear existing league data first."
        )

    @transaction.atomic
    def handle(self, *args: Any, **options: Any) -> None:
        if not options.get("keep"):
            self.stdout.write("Removing existing league data…")
            call_command("clear_demo_league", stdout=self.stdout)

        now = timezone.now()
        kickoff = now - timedelta(days=7)
        groups: list[Group] = []

        for group_name, members in DEMO_GROUPS.items():
            group = Group.objects.create(name=group_name, description=f"{group_name} of the demo season")
            teams = [Team.objects.create(name=name, college=college) for name, college in members]
            group.teams.add(*teams)
            groups.append(group)

            for home_idx, away_idx, home_score, away_score in DEMO_FIXTURES:
                kickoff += timedelta(hours=20)
                upcoming = home_score is None
                game = Game.objects.create(
                    home_team=teams[home_idx],
                    away_team=teams[away_idx],
                    starts_at=now + timedelta(days=3) if upcoming else kickoff,
                    status=GameStatus.UPCOMING,
                    venue=f"{teams[home_idx].college} Arena",
                )
                if not upcoming:
                    record_result(game, home_score, away_score)

        # A friendly between groups lands in the ungrouped table.
        home = groups[0].teams.order_by("id").first()
        away = groups[1].teams.order_by("id").first()
        friendly = Game.objects.create(home_team=home, away_team=away, starts_at=kickoff, venue="Neutral Ground")
        record_result(friendly, 1, 1)

        BlogPost.objects.create(
            title="Demo season kicks off",
            excerpt="Six colleges, two groups and one trophy.",
            author="League office",
            category="News",
        )

        self.stdout.write(
            self.style.SUCCESS(
                f"Demo league ready: {Team.objects.count()} teams, {Group.objects.count()} groups, "
                f"{Game.objects.count()} games."
            )
        )
