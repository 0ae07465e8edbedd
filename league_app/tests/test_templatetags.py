# file: league_app/tests/test_templatetags.py
"""Tests for the next-game and latest-result strips."""

from __future__ import annotations

from typing import Any

import pytest

from league_app.models import GameStatus
from league_app.services.results import record_result
from league_app.templatetags.league_tags import latest_result_strip, next_game_strip, signed

pytestmark = pytest.mark.django_db


def test_next_game_without_games() -> None:
    assert next_game_strip({})["next_game"] is None


def test_next_game_follows_team(teams: list[Any], make_game: Any) -> None:
    a, b, c, d = teams
    make_game(c, d)
    game = make_game(b, a, venue="Owl Arena")

    ctx = next_game_strip({"team": a})

    assert ctx["next_game"].venue == "Owl Arena"
    assert not ctx["next_game"].is_home
    assert ctx["home"]["name"] == "B"
    assert ctx["away"]["is_us"]
    assert ctx["detail_url"] == game.get_absolute_url()


def test_next_game_ignores_finished(teams: list[Any], make_game: Any) -> None:
    make_game(teams[0], teams[1], status=GameStatus.FINISHED)
    assert next_game_strip({})["next_game"] is None


def test_latest_result_outcome_for_team(teams: list[Any], make_game: Any) -> None:
    a, b, *_ = teams
    record_result(make_game(a, b), 0, 2)

    ctx = latest_result_strip({"team": a})

    assert ctx["latest"].outcome == "Loss"
    assert (ctx["latest"].home_score, ctx["latest"].away_score) == (0, 2)
    assert latest_result_strip({})["latest"].outcome is None


@pytest.mark.parametrize("value, expected", [(3, "+3"), (0, "0"), (-2, "-2"), ("x", "")])
def test_signed(value: Any, expected: str) -> None:
    assert signed(value) == expected
