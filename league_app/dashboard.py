# file: league_app/dashboard.py
"""Django JET dashboards for the league admin.

This module defines:

* :class:`UpcomingGamesModule` – fixtures for the next 14 days, live games
  included.
* :class:`CustomIndexDashboard` – the admin index (3 columns) with quick
  links, recent actions and model lists.
* :class:`CustomAppIndexDashboard` – per-app dashboard (2 columns).

Enabled through ``JET_INDEX_DASHBOARD`` / ``JET_APP_INDEX_DASHBOARD``.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from django.urls import reverse
from django.utils import timezone
from django.utils.html import format_html
from jet.dashboard import modules
from jet.dashboard.dashboard import AppIndexDashboard, Dashboard
from jet.dashboard.modules import DashboardModule

from .models import Game, GameStatus


# --- Upcoming games module -------------------------------------------------


class UpcomingGamesModule(DashboardModule):
    """List upcoming and live games within the next 14 days."""

    title: str = "Upcoming games (14 days)"
    template: str = "admin/dashboard/upcoming_games.html"
    limit: int = 10

    def init_with_context(self, context: dict[str, Any]) -> None:  # type: ignore[override]
        now = timezone.now()
        games = (
            Game.objects.filter(
                status__in=[GameStatus.UPCOMING, GameStatus.LIVE],
                starts_at__lte=now + timedelta(days=14),
            )
            .select_related("home_team", "away_team")
            .order_by("starts_at")[: self.limit]
        )

        self.children = []  # list of HTML strings
        for g in games:
            admin_url = reverse("admin:league_app_game_change", args=[g.pk])
            date_str = timezone.localtime(g.starts_at).strftime("%b %d, %H:%M")
            label = f"{g.home_team.name} vs {g.away_team.name}"
            if g.status == GameStatus.LIVE:
                label += " (live)"
            self.children.append(format_html('<a href="{}">{}</a> <small>{}</small>', admin_url, label, date_str))


# --- Index dashboard (site-wide) ------------------------------------------


class CustomIndexDashboard(Dashboard):
    """Main admin index dashboard with quick navigation and summaries."""

    columns: int = 3

    def init_with_context(self, context: dict[str, Any]) -> None:  # type: ignore[override]
        self.children.append(
            modules.LinkList(
                title="Quick links",
                children=[
                    {"title": "Add game", "url": reverse("admin:league_app_game_add"), "external": False},
                    {"title": "Add team", "url": reverse("admin:league_app_team_add"), "external": False},
                    {"title": "Groups", "url": reverse("admin:league_app_group_changelist"), "external": False},
                    {"title": "Standings", "url": reverse("portal:table_rank"), "external": False},
                ],
                column=0,
                collapsible=True,
            )
        )
        self.children.append(modules.RecentActions(title="Recent actions", limit=10, column=0, collapsible=True))
        self.children.append(
            modules.AppList(
                title="League",
                models=("league_app.*",),
                exclude=("django.contrib.*",),
                column=1,
                collapsible=True,
            )
        )
        self.children.append(
            modules.ModelList(
                title="Fixtures & results",
                models=("league_app.models.Game", "league_app.models.Result"),
                column=2,
                collapsible=True,
            )
        )
        self.children.append(
            modules.ModelList(
                title="Content",
                models=("league_app.models.BlogPost", "league_app.models.Vlog"),
                column=2,
                collapsible=True,
            )
        )
        self.children.append(UpcomingGamesModule(column=2))


# --- App index dashboard (per app) ----------------------------------------


class CustomAppIndexDashboard(AppIndexDashboard):
    """Per-app dashboard listing models and recent actions for that app."""

    columns: int = 2

    def init_with_context(self, context: dict[str, Any]) -> None:  # type: ignore[override]
        self.children.append(modules.ModelList(title="Models", models=(f"{self.app_label}.*",), column=0))
        self.children.append(
            modules.RecentActions(
                title="Recent actions", include_list=(f"{self.app_label}.*",), limit=10, column=1
            )
        )
