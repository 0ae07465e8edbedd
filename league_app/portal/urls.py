# file: league_app/portal/urls.py
"""URL configuration for the authenticated *Portal* section.

Routes
------
- ``""`` → Dashboard (role-aware)
- ``"table-rank/"`` → Standings for league admins
- ``"groups/"`` → Groups board
- ``"results/"`` → Result entry
- ``"blog/"`` / ``"vlog/"`` → Content managers
- ``"<kind>/<pk>/delete/"`` → Delete a blog post or vlog
- ``"account/"`` → Profile photo and password change
"""

from __future__ import annotations

from django.urls import path
from django.urls.resolvers import URLPattern

from .views.account import AccountView
from .views.content import BlogManagerView, ContentDeleteView, VlogManagerView
from .views.dashboard import DashboardView
from .views.groups import GroupsBoardView
from .views.results import ResultEntryView
from .views.standings import TableRankView

app_name = "portal"

urlpatterns: list[URLPattern] = [
    path("", DashboardView.as_view(), name="dashboard"),
    path("table-rank/", TableRankView.as_view(), name="table_rank"),
    path("groups/", GroupsBoardView.as_view(), name="groups"),
    path("results/", ResultEntryView.as_view(), name="results"),
    path("blog/", BlogManagerView.as_view(), name="blog_manager"),
    path("vlog/", VlogManagerView.as_view(), name="vlog_manager"),
    path("<str:kind>/<int:pk>/delete/", ContentDeleteView.as_view(), name="content_delete"),
    path("account/", AccountView.as_view(), name="account"),
]
