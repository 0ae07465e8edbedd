# file: league_app/portal/views/results.py
"""Result entry for league admins."""

from __future__ import annotations

from typing import Any

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.http import HttpResponse
from django.shortcuts import redirect
from django.views.generic import FormView

from league_app.forms import ResultForm
from league_app.models import Result
from league_app.portal.mixins import LeagueAdminRequiredMixin
from league_app.services.results import record_result


class ResultEntryView(LeagueAdminRequiredMixin, FormView):
    """Record the final score of an unfinished game."""

    template_name = "portal/results.html"
    form_class = ResultForm

    def get_initial(self) -> dict[str, Any]:
        initial = super().get_initial()
        game_id = self.request.GET.get("game")
        if game_id and game_id.isdigit():
            initial["game"] = int(game_id)
        return initial

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        ctx = super().get_context_data(**kwargs)
        ctx["current"] = "results"
        ctx["recent_results"] = Result.objects.select_related("home_team", "away_team", "game").order_by("-updated_at")[:10]
        return ctx

    def form_valid(self, form: ResultForm) -> HttpResponse:
        data = form.cleaned_data
        try:
            record_result(
                data["game"],
                data["home_score"],
                data["away_score"],
                home_yellow_cards=data.get("home_yellow_cards") or 0,
                away_yellow_cards=data.get("away_yellow_cards") or 0,
                home_red_cards=data.get("home_red_cards") or 0,
                away_red_cards=data.get("away_red_cards") or 0,
            )
        except ValidationError as exc:
            form.add_error(None, exc)
            return self.form_invalid(form)
        messages.success(self.request, "The game result has been successfully recorded.")
        return redirect("portal:results")
