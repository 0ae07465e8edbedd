# file: league_app/site/views/home.py
"""Public site homepage view.

Exposes :class:`HomeView`, which renders ``site/home.html`` with the latest
blog posts and the next fixtures (upcoming or live).
"""

from __future__ import annotations

from typing import Any

from django.views.generic import TemplateView

from league_app.models import BlogPost, Game, GameStatus

LATEST_POSTS = 3
NEXT_GAMES = 5


class HomeView(TemplateView):
    """Render the site homepage."""

    template_name = "site/home.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        ctx = super().get_context_data(**kwargs)
        ctx["title"] = "Home"
        ctx["latest_posts"] = BlogPost.objects.all()[:LATEST_POSTS]
        ctx["next_games"] = (
            Game.objects.select_related("home_team", "away_team")
            .filter(status__in=[GameStatus.UPCOMING, GameStatus.LIVE])
            .order_by("starts_at")[:NEXT_GAMES]
        )
        return ctx
