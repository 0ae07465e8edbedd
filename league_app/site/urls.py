# file: league_app/site/urls.py
"""Public *Site* URL configuration.

Routes
------
- ``""`` → Home
- ``"standings/"`` → Group standings
- ``"teams/"`` / ``"teams/<int:pk>/"`` → Teams and team detail
- ``"matches/"`` → Fixtures and results
- ``"blog/"`` / ``"vlog/"`` → Published content
- ``"login/"`` / ``"logout/"`` / ``"signup/"`` → Authentication
"""

from __future__ import annotations

from django.urls import path
from django.urls.resolvers import URLPattern

from .views.auth import SignupView, SiteLoginView, SiteLogoutView
from .views.content import BlogListView, VlogListView
from .views.home import HomeView
from .views.matches import MatchesView
from .views.standings import StandingsView
from .views.teams import TeamDetailView, TeamListView

app_name = "site"

urlpatterns: list[URLPattern] = [
    path("", HomeView.as_view(), name="home"),
    path("standings/", StandingsView.as_view(), name="standings"),
    path("teams/", TeamListView.as_view(), name="teams"),
    path("teams/<int:pk>/", TeamDetailView.as_view(), name="team_detail"),
    path("matches/", MatchesView.as_view(), name="matches"),
    path("blog/", BlogListView.as_view(), name="blog"),
    path("vlog/", VlogListView.as_view(), name="vlog"),

    # Authentication
    path("login/", SiteLoginView.as_view(), name="login"),
    path("logout/", SiteLogoutView.as_view(), name="logout"),
    path("signup/", SignupView.as_view(), name="signup"),
]
