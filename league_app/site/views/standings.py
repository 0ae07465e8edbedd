# file: league_app/site/views/standings.py
"""Public standings page.

:class:`StandingsMixin` computes the group tables from an injected
:class:`~league_app.services.league_data.LeagueDataSource` and exposes three
template states:

* ``standings_error`` – the snapshot could not be loaded (blocking error),
* ``tables`` empty – no groups yet (explicit empty state),
* ``tables`` – ranked tables, ungrouped matches last.

The public page also sets ``include_overall`` and shows the league-wide
``overall`` table above the group tables.

The source defaults to the configured one; set ``data_source`` on the view
(or pass it to ``as_view``) to swap it.
"""

from __future__ import annotations

from typing import Any, Optional

from django.views.generic import TemplateView

from league_app.exceptions import StandingsUnavailable
from league_app.services.league_data import LeagueDataSource, compute_standings, get_data_source


class StandingsMixin:
    """Add standings tables (or an error flag) to the template context."""

    data_source: Optional[LeagueDataSource] = None
    include_overall: bool = False

    def get_data_source(self) -> LeagueDataSource:
        return self.data_source if self.data_source is not None else get_data_source()

    def get_standings_context(self) -> dict[str, Any]:
        try:
            report = compute_standings(self.get_data_source(), include_overall=self.include_overall)
        except StandingsUnavailable as exc:
            return {
                "report": None,
                "overall": None,
                "tables": [],
                "standings_error": str(exc),
                "skipped_results": 0,
            }
        return {
            "report": report,
            "overall": report.overall,
            "tables": report.tables,
            "standings_error": None,
            "skipped_results": report.skipped_results,
        }


class StandingsView(StandingsMixin, TemplateView):
    """Render league standings grouped by league group."""

    template_name = "site/standings.html"
    include_overall = True

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        ctx = super().get_context_data(**kwargs)
        ctx["title"] = "League Standings"
        ctx.update(self.get_standings_context())
        return ctx
