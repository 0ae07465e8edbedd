# file: league_app/templatetags/league_tags.py
"""Template tags for the next fixture and the latest result (HOME left, AWAY right).

Usage in templates:
    {% load league_tags %}
    {% next_game_strip %}
    {% latest_result_strip %}

Both tags follow ``team`` from the context when present; without it they show
the league-wide next fixture and latest result.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from django import template
from django.db.models import Q, QuerySet

from league_app.models import Game, GameStatus, Result, Team

register = template.Library()


@dataclass(frozen=True)
class NextGameVM:
    """Meta for the center column of the banner."""

    datetime: datetime
    venue: Optional[str] = None
    status: str = GameStatus.UPCOMING
    is_home: bool = False  # whether the followed team plays at home


@dataclass(frozen=True)
class LatestResultVM:
    home_score: int
    away_score: int
    outcome: Optional[str] = None  # "Win" | "Loss" | "Draw" for the followed team


def _side(team: Optional[Team], is_us: bool) -> dict[str, Any]:
    if team is None:
        return {"name": "TBD", "college": None, "logo_url": None, "is_us": False}
    return {
        "name": team.name,
        "college": team.college or None,
        "logo_url": team.logo_url or None,
        "is_us": is_us,
    }


def _for_team(qs: QuerySet, team: Optional[Team]) -> QuerySet:
    if team is None:
        return qs
    return qs.filter(Q(home_team=team) | Q(away_team=team))


@register.inclusion_tag("league_app/next_game_strip.html", takes_context=True)
def next_game_strip(context: dict[str, Any]) -> dict[str, Any]:
    """Return context for the next upcoming or live game."""
    team = context.get("team")
    game: Game | None = (
        _for_team(Game.objects.select_related("home_team", "away_team"), team)
        .filter(status__in=[GameStatus.LIVE, GameStatus.UPCOMING])
        .order_by("starts_at")
        .first()
    )
    if not game:
        return {"next_game": None, "team": team}

    is_home = team is not None and game.home_team_id == team.pk
    vm = NextGameVM(datetime=game.starts_at, venue=game.venue or None, status=game.status, is_home=is_home)
    return {
        "next_game": vm,
        "team": team,
        "home": _side(game.home_team, is_home),
        "away": _side(game.away_team, team is not None and not is_home),
        "detail_url": game.get_absolute_url(),
    }


@register.inclusion_tag("league_app/latest_result_strip.html", takes_context=True)
def latest_result_strip(context: dict[str, Any]) -> dict[str, Any]:
    """Return context for the most recently updated result."""
    team = context.get("team")
    result: Result | None = (
        _for_team(Result.objects.select_related("home_team", "away_team"), team)
        .order_by("-updated_at", "-id")
        .first()
    )
    if not result:
        return {"latest": None, "team": team}

    outcome = None
    is_home = team is not None and result.home_team_id == team.pk
    if team is not None:
        us, them = (
            (result.home_score, result.away_score) if is_home else (result.away_score, result.home_score)
        )
        outcome = "Win" if us > them else "Loss" if us < them else "Draw"

    return {
        "latest": LatestResultVM(result.home_score, result.away_score, outcome),
        "team": team,
        "home": _side(result.home_team, is_home),
        "away": _side(result.away_team, team is not None and not is_home),
    }


@register.filter
def signed(value: Any) -> str:
    """Render a goal difference with an explicit sign (``+3``, ``0``, ``-2``)."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return ""
    return f"+{number}" if number > 0 else str(number)
