# file: league_app/tests/models/test_games.py
"""Validation tests for ``Game`` and ``Result``."""

from __future__ import annotations

from typing import Any

import pytest
from django.core.exceptions import ValidationError
from django.utils import timezone

from league_app.models import GameStatus

pytestmark = pytest.mark.django_db


def test_game_defaults_to_upcoming(teams: list[Any], make_game: Any) -> None:
    game = make_game(teams[0], teams[1])
    assert game.status == GameStatus.UPCOMING
    assert game.get_absolute_url().endswith(f"#game-{game.pk}")


def test_game_teams_must_be_distinct(Game: Any, teams: list[Any]) -> None:
    game = Game(home_team=teams[0], away_team=teams[0], starts_at=timezone.now())
    with pytest.raises(ValidationError):
        game.full_clean()


def test_result_teams_must_be_distinct(Result: Any, teams: list[Any]) -> None:
    result = Result(home_team=teams[0], away_team=teams[0], home_score=1, away_score=0)
    with pytest.raises(ValidationError):
        result.full_clean()


def test_result_teams_must_match_game(Result: Any, teams: list[Any], make_game: Any) -> None:
    a, b, c, _d = teams
    game = make_game(a, b)
    result = Result(game=game, home_team=a, away_team=c)
    with pytest.raises(ValidationError, match="must match"):
        result.full_clean()


def test_result_without_game_is_valid(Result: Any, teams: list[Any]) -> None:
    result = Result(home_team=teams[0], away_team=teams[1], home_score=4, away_score=1)
    result.full_clean()
    assert result.home_goal_difference == 3
    assert result.away_goal_difference == -3


def test_one_result_per_game(Result: Any, teams: list[Any], make_game: Any) -> None:
    from django.db import IntegrityError

    game = make_game(teams[0], teams[1])
    Result.objects.create(game=game)
    with pytest.raises(IntegrityError):
        Result.objects.create(game=game)
