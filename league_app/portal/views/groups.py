# file: league_app/portal/views/groups.py
"""Groups board: list groups with members and move teams between them."""

from __future__ import annotations

from typing import Any

from django.contrib import messages
from django.db.models import Prefetch
from django.http import HttpResponse
from django.shortcuts import redirect
from django.views.generic import FormView

from league_app.forms import MoveTeamForm
from league_app.models import Group, Team
from league_app.portal.mixins import LeagueAdminRequiredMixin
from league_app.services.groups import move_team


class GroupsBoardView(LeagueAdminRequiredMixin, FormView):
    template_name = "portal/groups.html"
    form_class = MoveTeamForm

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        ctx = super().get_context_data(**kwargs)
        ctx["current"] = "groups"
        ctx["groups"] = Group.objects.order_by("id").prefetch_related(
            Prefetch("teams", queryset=Team.objects.order_by("name"))
        )
        ctx["unassigned_teams"] = Team.objects.filter(member_groups__isnull=True).order_by("name")
        return ctx

    def form_valid(self, form: MoveTeamForm) -> HttpResponse:
        team: Team = form.cleaned_data["team"]
        target: Group | None = form.cleaned_data["group"]
        move_team(team, target)
        messages.success(self.request, f"{team.name} moved to {target.name if target else 'no group'}.")
        return redirect("portal:groups")

    def form_invalid(self, form: MoveTeamForm) -> HttpResponse:
        messages.error(self.request, "Failed to move team.")
        return super().form_invalid(form)
