# file: league_app/portal/mixins.py
"""Access control for the league office pages."""

from __future__ import annotations

from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin

from league_app.models import UserProfile


def is_league_admin(user) -> bool:
    """Staff accounts and users with the admin league role."""
    if not getattr(user, "is_authenticated", False):
        return False
    if user.is_staff:
        return True
    return UserProfile.objects.filter(user_id=user.pk, role=UserProfile.Role.ADMIN).exists()


class LeagueAdminRequiredMixin(LoginRequiredMixin, UserPassesTestMixin):
    """Anonymous users go to login; other non-admins get 403."""

    def test_func(self) -> bool:
        return is_league_admin(self.request.user)
