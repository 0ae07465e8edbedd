# file: league_app/portal/views/dashboard.py
"""Portal dashboard for authenticated users.

The dashboard is role-aware: admins see league counters and the latest
results, college heads see their college's teams and students, students see
their team and its next fixtures.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model
from django.contrib.auth.mixins import LoginRequiredMixin
from django.db.models import Q
from django.views.generic import TemplateView

from league_app.models import BlogPost, Game, GameStatus, Group, Result, Team, UserProfile, Vlog

RECENT = 5


class DashboardView(LoginRequiredMixin, TemplateView):
    """Dashboard page for logged-in users."""

    template_name: str = "portal/dashboard.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # override
        ctx = super().get_context_data(**kwargs)
        ctx["current"] = "dashboard"

        user = self.request.user
        profile, _ = UserProfile.objects.get_or_create(user=user)
        role = UserProfile.Role.ADMIN if profile.is_league_admin else profile.role
        ctx["role"] = role
        ctx["profile"] = profile

        if role == UserProfile.Role.ADMIN:
            ctx["counters"] = {
                "teams": Team.objects.count(),
                "groups": Group.objects.count(),
                "users": get_user_model().objects.count(),
                "games": Game.objects.count(),
                "results": Result.objects.count(),
                "posts": BlogPost.objects.count() + Vlog.objects.count(),
            }
            ctx["recent_results"] = Result.objects.select_related("home_team", "away_team").order_by("-updated_at")[:RECENT]
        elif role == UserProfile.Role.COLLEGE_HEAD:
            college = profile.college or ""
            ctx["college_teams"] = Team.objects.filter(college__iexact=college).order_by("name") if college else []
            ctx["college_students"] = (
                UserProfile.objects.filter(college__iexact=college, role=UserProfile.Role.STUDENT).count()
                if college
                else 0
            )
        else:
            team = profile.team
            ctx["team"] = team
            ctx["next_games"] = (
                Game.objects.select_related("home_team", "away_team")
                .filter(Q(home_team=team) | Q(away_team=team), status__in=[GameStatus.UPCOMING, GameStatus.LIVE])
                .order_by("starts_at")[:RECENT]
                if team
                else []
            )
        return ctx
