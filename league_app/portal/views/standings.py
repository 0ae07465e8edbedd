# file: league_app/portal/views/standings.py
"""Office view of the standings tables (same data as the public page)."""

from __future__ import annotations

from typing import Any

from django.views.generic import TemplateView

from league_app.portal.mixins import LeagueAdminRequiredMixin
from league_app.site.views.standings import StandingsMixin


class TableRankView(LeagueAdminRequiredMixin, StandingsMixin, TemplateView):
    """Standings per group for league admins, with the skipped-result count."""

    template_name = "portal/table_rank.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        ctx = super().get_context_data(**kwargs)
        ctx["current"] = "table_rank"
        ctx.update(self.get_standings_context())
        return ctx
