# file: league_app/site/views/matches.py
"""Public fixtures and results page."""

from __future__ import annotations

from typing import Any

from django.views.generic import TemplateView

from league_app.models import Game, GameStatus


class MatchesView(TemplateView):
    """Upcoming/live fixtures first, then finished games newest first."""

    template_name = "site/matches.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        ctx = super().get_context_data(**kwargs)
        games = Game.objects.select_related("home_team", "away_team", "result")
        ctx["title"] = "Matches"
        ctx["live_games"] = games.filter(status=GameStatus.LIVE).order_by("starts_at")
        ctx["upcoming_games"] = games.filter(status=GameStatus.UPCOMING).order_by("starts_at")
        ctx["finished_games"] = games.filter(status=GameStatus.FINISHED).order_by("-starts_at")
        return ctx
