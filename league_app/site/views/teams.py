# file: league_app/site/views/teams.py
"""Public team pages: list and detail."""

from __future__ import annotations

from typing import Any

from django.db.models import Q
from django.views.generic import DetailView, ListView

from league_app.models import Game, Team
from league_app.services.results import standings_for_team

from .standings import StandingsMixin


class TeamListView(ListView):
    """All teams alphabetically with their current group."""

    template_name = "site/teams.html"
    context_object_name = "teams"

    def get_queryset(self) -> Any:
        return Team.objects.select_related("current_group").order_by("name")


class TeamDetailView(StandingsMixin, DetailView):
    """Team profile with fixtures, group mates and standing rows."""

    template_name = "site/team_detail.html"
    context_object_name = "team"
    model = Team

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        ctx = super().get_context_data(**kwargs)
        team: Team = self.object
        ctx["games"] = (
            Game.objects.select_related("home_team", "away_team", "result")
            .filter(Q(home_team=team) | Q(away_team=team))
            .order_by("-starts_at")
        )
        group = team.current_group
        ctx["group"] = group
        ctx["group_mates"] = group.teams.exclude(pk=team.pk).order_by("name") if group else []

        standings = self.get_standings_context()
        ctx["standings_error"] = standings["standings_error"]
        report = standings["report"]
        ctx["team_rows"] = standings_for_team(team, report) if report is not None else []
        return ctx
