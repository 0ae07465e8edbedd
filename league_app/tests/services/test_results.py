# file: league_app/tests/services/test_results.py
"""Tests for recording results and reading a team's standing rows."""

from __future__ import annotations

from typing import Any

import pytest
from django.core.exceptions import ValidationError

from league_app.models import GameStatus
from league_app.services.league_data import compute_standings
from league_app.services.results import record_result, standings_for_team

pytestmark = pytest.mark.django_db


def test_record_result_creates_result_and_finishes_game(teams: list[Any], make_game: Any) -> None:
    a, b, *_ = teams
    game = make_game(a, b)

    result = record_result(game, 3, 1, home_yellow_cards=2, away_red_cards=1)

    game.refresh_from_db()
    assert game.status == GameStatus.FINISHED
    assert (result.home_team_id, result.away_team_id) == (a.pk, b.pk)
    assert (result.home_score, result.away_score) == (3, 1)
    assert (result.home_points, result.away_points) == (3, 0)
    assert (result.home_yellow_cards, result.away_red_cards) == (2, 1)


def test_record_result_updates_existing(teams: list[Any], make_game: Any, Result: Any) -> None:
    a, b, *_ = teams
    game = make_game(a, b)
    record_result(game, 0, 2)

    result = record_result(game, 1, 1)

    assert Result.objects.filter(game=game).count() == 1
    assert (result.home_points, result.away_points) == (1, 1)


def test_record_result_rejects_negative_values(teams: list[Any], make_game: Any, Result: Any) -> None:
    game = make_game(teams[0], teams[1])

    with pytest.raises(ValidationError) as excinfo:
        record_result(game, -1, 0, away_yellow_cards=-2)

    assert set(excinfo.value.message_dict) == {"home_score", "away_yellow_cards"}
    assert not Result.objects.exists()
    game.refresh_from_db()
    assert game.status == GameStatus.UPCOMING


def test_standings_for_team_lists_every_table(Group: Any, teams: list[Any], make_game: Any) -> None:
    a, b, c, _d = teams
    Group.objects.create(name="G").teams.add(a, b)
    record_result(make_game(a, b), 2, 0)
    record_result(make_game(a, c), 0, 1)

    rows = standings_for_team(a, compute_standings())

    assert [(name, row.points) for name, row in rows] == [("G", 3), ("Ungrouped Matches", 0)]
