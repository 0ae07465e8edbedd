# file: league_app/tests/admin/test_admin.py
"""Tests for the Django admin customizations.

Coverage:
* Registry presence of league models (and the re-registered user admin).
* Group admin member counts and the current-group resync action.
* Game admin score column, inline result team copying and ``mark_finished``.
* Content admins use the upload forms.
* Player selections record their creator.
"""

from __future__ import annotations

import types
from typing import Any

import pytest
from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.messages.storage.fallback import FallbackStorage
from django.http import HttpRequest
from django.test import RequestFactory

from league_app.admin import GameAdmin, GroupAdmin, LeagueUserAdmin, PlayerSelectionAdmin, TeamAdmin
from league_app.forms import BlogPostForm, VlogForm
from league_app.models import BlogPost, Game, GameStatus, Group, PlayerSelection, Result, Team, Vlog
from league_app.services.results import record_result

pytestmark = pytest.mark.django_db


# --- Helpers -------------------------------------------------------------------


def make_request(path: str = "/admin/", user: Any = None) -> HttpRequest:
    """Create a GET request with message storage and a permissive user."""
    req = RequestFactory().get(path)
    req.user = user or types.SimpleNamespace(
        has_perm=lambda perm: True,
        is_authenticated=True,
        is_active=True,
        is_staff=True,
        is_superuser=True,
    )
    req.session = {}
    req._messages = FallbackStorage(req)
    return req


def _messages(req: HttpRequest) -> list[str]:
    return [str(m) for m in req._messages]


# --- Registry --------------------------------------------------------------------


@pytest.mark.parametrize("model", [Team, Group, Game, Result, BlogPost, Vlog, PlayerSelection])
def test_models_are_registered(model: Any) -> None:
    assert model in admin.site._registry


def test_user_admin_is_league_variant() -> None:
    assert isinstance(admin.site._registry[get_user_model()], LeagueUserAdmin)


def test_content_admins_use_upload_forms() -> None:
    assert admin.site._registry[BlogPost].form is BlogPostForm
    assert admin.site._registry[Vlog].form is VlogForm


# --- Teams & groups ----------------------------------------------------------------


def test_logo_preview(teams: list[Any]) -> None:
    team_admin = TeamAdmin(Team, admin.site)
    team = teams[0]
    assert team_admin.logo_preview(team) == "—"
    team.logo_url = "https://cdn.example/logo.png"
    assert 'src="https://cdn.example/logo.png"' in team_admin.logo_preview(team)


def test_group_member_count_annotation(teams: list[Any]) -> None:
    group = Group.objects.create(name="G")
    group.teams.add(*teams[:3])
    group_admin = GroupAdmin(Group, admin.site)

    obj = group_admin.get_queryset(make_request()).get(pk=group.pk)
    assert group_admin.member_count(obj) == 3


def test_resync_action_repairs_cache(teams: list[Any]) -> None:
    a = teams[0]
    group = Group.objects.create(name="G")
    group.teams.add(a)
    Team.objects.filter(pk=a.pk).update(current_group=None)

    req = make_request()
    GroupAdmin(Group, admin.site).resync_current_groups(req, Group.objects.all())

    a.refresh_from_db()
    assert a.current_group_id == group.pk
    assert _messages(req) == ["Done. Updated 1 teams."]


# --- Games ---------------------------------------------------------------------------


def test_score_column(teams: list[Any], make_game: Any) -> None:
    game_admin = GameAdmin(Game, admin.site)
    game = make_game(teams[0], teams[1])
    assert game_admin.score(game) == "—"

    record_result(game, 2, 3)
    game = game_admin.get_queryset(make_request()).get(pk=game.pk)
    assert game_admin.score(game) == "2:3"


def test_save_formset_copies_game_teams(teams: list[Any], make_game: Any) -> None:
    a, b, *_ = teams
    game = make_game(a, b)
    result = Result(game=game, home_score=1, away_score=0)

    formset = types.SimpleNamespace(
        save=lambda commit=True: [result],
        deleted_objects=[],
        save_m2m=lambda: None,
    )
    form = types.SimpleNamespace(instance=game)
    GameAdmin(Game, admin.site).save_formset(make_request(), form, formset, change=True)

    result.refresh_from_db()
    assert (result.home_team_id, result.away_team_id) == (a.pk, b.pk)


def test_mark_finished_only_touches_games_with_results(teams: list[Any], make_game: Any) -> None:
    a, b, c, d = teams
    with_result = make_game(a, b)
    Result.objects.create(game=with_result, home_team=a, away_team=b, home_score=1, away_score=1)
    without_result = make_game(c, d)

    req = make_request()
    GameAdmin(Game, admin.site).mark_finished(req, Game.objects.all())

    with_result.refresh_from_db()
    without_result.refresh_from_db()
    assert with_result.status == GameStatus.FINISHED
    assert without_result.status == GameStatus.UPCOMING
    assert _messages(req) == ["1 games have no result and were skipped.", "Done. Finished 1 games."]


# --- Selections -----------------------------------------------------------------------


def test_selection_records_creator(office_user: Any) -> None:
    selection = PlayerSelection(name="Roster")
    req = make_request(user=office_user)

    PlayerSelectionAdmin(PlayerSelection, admin.site).save_model(req, selection, form=None, change=False)

    assert selection.created_by == office_user


# --- JET dashboard ----------------------------------------------------------------------


def test_upcoming_games_module_lists_open_games(teams: list[Any], make_game: Any) -> None:
    from league_app.dashboard import UpcomingGamesModule

    a, b, c, d = teams
    upcoming = make_game(a, b)
    make_game(c, d, status=GameStatus.FINISHED)

    module = UpcomingGamesModule()
    module.init_with_context({})

    assert len(module.children) == 1
    assert f"/admin/league_app/game/{upcoming.pk}/change/" in module.children[0]
    assert "A vs B" in module.children[0]
