# file: league_app/services/results.py
"""Recording match results.

:func:`record_result` is the only write path used by the portal and the admin
action. It stores points derived with the same 3/1/0 rule as the standings
aggregator, so stored and derived values never disagree.
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from league_app.models import Game, GameStatus, Result, Team
from league_app.services.standings import StandingRow, StandingsReport, derive_points

logger = logging.getLogger(__name__)

__all__ = ["record_result", "standings_for_team"]


@transaction.atomic
def record_result(
    game: Game,
    home_score: int,
    away_score: int,
    *,
    home_yellow_cards: int = 0,
    away_yellow_cards: int = 0,
    home_red_cards: int = 0,
    away_red_cards: int = 0,
) -> Result:
    """Create or update the result of ``game`` and mark the game finished.

    Teams are copied from the game. Points are derived from the score.

    Raises:
        ValidationError: If a score or card count is negative.
    """
    counts = {
        "home_score": home_score,
        "away_score": away_score,
        "home_yellow_cards": home_yellow_cards,
        "away_yellow_cards": away_yellow_cards,
        "home_red_cards": home_red_cards,
        "away_red_cards": away_red_cards,
    }
    errors = {name: "Must be a non-negative number." for name, value in counts.items() if int(value) < 0}
    if errors:
        raise ValidationError(errors)

    home_points, away_points = derive_points(int(home_score), int(away_score))

    result, created = Result.objects.update_or_create(
        game=game,
        defaults={
            "home_team_id": game.home_team_id,
            "away_team_id": game.away_team_id,
            "home_points": home_points,
            "away_points": away_points,
            **{name: int(value) for name, value in counts.items()},
        },
    )

    if game.status != GameStatus.FINISHED:
        game.status = GameStatus.FINISHED
        game.save(update_fields=["status"])

    logger.info(
        "%s result for game %s: %s-%s",
        "Recorded" if created else "Updated",
        game.pk,
        home_score,
        away_score,
    )
    return result


def standings_for_team(team: Team, report: StandingsReport) -> list[tuple[str, StandingRow]]:
    """Return ``(table name, row)`` pairs for ``team`` across all tables."""
    team_id = str(team.pk)
    return [
        (table.group_name, row)
        for table in report.tables
        for row in table.rows
        if row.team_id == team_id
    ]
